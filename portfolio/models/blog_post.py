"""Blog post model.

A post is backed by exactly one markdown file:
    <blog_root>/live/<year>/<slug>.md      (status: live)
    <blog_root>/archive/<year>/<slug>.md   (status: archived)

The directory holding the file *is* the status; nothing else records it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class PostStatus(str, Enum):
    """Lifecycle state of a blog post."""

    LIVE = "live"
    ARCHIVED = "archived"


@dataclass
class BlogPost:
    """A parsed blog post."""

    slug: str
    title: str
    description: str
    content: str
    file_path: Path
    year: int
    status: PostStatus
    header_image: str | None = None
    tags: list[str] = field(default_factory=list)

    # Timestamps come from the backing file's stat()
    created_at: datetime | None = None
    updated_at: datetime | None = None
    archived_at: datetime | None = None
    is_old_archived: bool = False

    def __repr__(self) -> str:
        return f"<BlogPost {self.status.value}/{self.year}/{self.slug}>"
