"""Domain models.

Models are plain dataclasses; persistence lives in ``portfolio.stores``:
- BlogPost: one markdown file under blog/live or blog/archive
- CaptchaSession: one entry in the CAPTCHA session store
"""

from portfolio.models.blog_post import BlogPost, PostStatus
from portfolio.models.captcha import CaptchaSession

__all__ = ["BlogPost", "PostStatus", "CaptchaSession"]
