"""Shared static admin key.

The key comes from ADMIN_API_KEY, else from the ``adminApiKey`` field of
the admin auth config file (config/blog-auth.json). No key configured
means every admin request is rejected.
"""

import logging
import secrets

from portfolio.settings import get_settings
from portfolio.stores.json_file import read_json_object

logger = logging.getLogger("uvicorn.error")


def load_admin_api_key() -> str:
    settings = get_settings()
    if settings.admin_api_key:
        return settings.admin_api_key

    path = settings.admin_auth_file
    if not path.exists():
        logger.warning(f"No admin key configured (ADMIN_API_KEY unset, {path} missing)")
        return ""
    return str(read_json_object(path).get("adminApiKey") or "")


def is_admin_key(candidate: str | None) -> bool:
    """Constant-time comparison against the configured key."""
    expected = load_admin_api_key()
    if not expected or not candidate:
        return False
    return secrets.compare_digest(candidate.encode(), expected.encode())
