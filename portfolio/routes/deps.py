"""Shared route dependencies."""

import logging

from fastapi import Header

from portfolio.errors import UnauthorizedError
from portfolio.services.auth import is_admin_key

logger = logging.getLogger("uvicorn.error")


async def require_admin(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    """Reject the request unless X-API-Key matches the admin key."""
    if not is_admin_key(x_api_key):
        logger.warning("Rejected admin request: missing or invalid X-API-Key")
        raise UnauthorizedError("Unauthorized")
