"""Blog service: create/read/update and the live/archive lifecycle.

State machine (status is the directory that holds the file):

    live --archive--> archived     file -> archive/<post.year>/<slug>.md
    archived --unarchive--> live   file -> live/<current year>/<slug>.md

Unarchiving files the post under the current year, not its original one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from functools import lru_cache
import logging
from pathlib import Path
from typing import Any

from portfolio.errors import (
    ConflictError,
    DomainValidationError,
    InvalidTransitionError,
    NotFoundError,
)
from portfolio.models import BlogPost, PostStatus
from portfolio.services.blog_format import format_blog_post, parse_blog_post
from portfolio.settings import get_settings
from portfolio.stores.blog_files import BlogFiles

logger = logging.getLogger("uvicorn.error")

_EDITABLE_FIELDS = ("title", "description", "header_image", "tags", "content")


@dataclass
class BlogPostDraft:
    """Fields an author supplies when creating a post."""

    title: str
    description: str
    content: str
    header_image: str | None = None
    tags: list[str] = field(default_factory=list)


class BlogService:
    """Blog operations over a ``BlogFiles`` layout."""

    def __init__(
        self,
        files: BlogFiles,
        *,
        old_archive_days: int = 365,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.files = files
        self.old_archive_age = timedelta(days=old_archive_days)
        self._clock = clock

    # ------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------

    def _load(self, slug: str, path: Path, status: PostStatus) -> BlogPost:
        now = self._clock()
        post = parse_blog_post(self.files.read(path), slug, path, status, now=now)
        stat = path.stat()
        post.created_at = datetime.fromtimestamp(stat.st_ctime)
        post.updated_at = datetime.fromtimestamp(stat.st_mtime)
        if status is PostStatus.ARCHIVED:
            post.archived_at = post.updated_at
            post.is_old_archived = post.archived_at < now - self.old_archive_age
        return post

    def list_posts(
        self,
        *,
        include_old_archived: bool = False,
        status: PostStatus | None = None,
        tags: Iterable[str] | None = None,
    ) -> list[BlogPost]:
        """List posts, newest modification first.

        Archived posts untouched for longer than ``old_archive_days`` are
        left out unless ``include_old_archived`` is set.

        Args:
            include_old_archived: Include old-archived posts.
            status: Only return posts in this state.
            tags: Only return posts carrying at least one of these tags.
        """
        wanted_tags = set(tags or ())
        statuses = [status] if status else [PostStatus.LIVE, PostStatus.ARCHIVED]

        posts: list[BlogPost] = []
        for st in statuses:
            for slug, path in self.files.iter_posts(st):
                post = self._load(slug, path, st)
                if post.is_old_archived and not include_old_archived:
                    continue
                if wanted_tags and not wanted_tags.intersection(post.tags):
                    continue
                posts.append(post)

        posts.sort(key=lambda p: p.updated_at or datetime.min, reverse=True)
        return posts

    def list_tags(self, *, include_old_archived: bool = False) -> list[str]:
        """Sorted set of tags across listed posts."""
        tags: set[str] = set()
        for post in self.list_posts(include_old_archived=include_old_archived):
            tags.update(post.tags)
        return sorted(tags)

    def get_post(self, slug: str) -> BlogPost:
        """Get a post by slug (live first, then archive).

        Raises:
            NotFoundError: If no file backs the slug.
        """
        found = self.files.find(slug)
        if found is None:
            raise NotFoundError("Blog post not found", detail={"slug": slug})
        path, status = found
        return self._load(slug, path, status)

    # ------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------

    def create_post(self, slug: str, draft: BlogPostDraft) -> BlogPost:
        """Create a live post under the current year.

        Raises:
            DomainValidationError: If the slug is empty.
            ConflictError: If the slug already exists for the current year.
        """
        if not slug:
            raise DomainValidationError("Cannot derive a slug from the title")

        year = self._clock().year
        path = self.files.post_path(PostStatus.LIVE, year, slug)
        if path.exists():
            raise ConflictError(
                "Blog post with this slug already exists",
                detail={"slug": slug, "year": year},
            )

        self.files.write(
            path,
            format_blog_post(
                title=draft.title,
                description=draft.description,
                content=draft.content,
                header_image=draft.header_image,
                tags=draft.tags,
            ),
        )
        logger.info(f"Blog post created: {slug} ({year})")
        return self._load(slug, path, PostStatus.LIVE)

    def update_post(self, slug: str, changes: dict[str, Any]) -> BlogPost:
        """Merge ``changes`` over an existing post and rewrite it in place.

        Keys absent from ``changes`` keep their prior values. ``header_image``
        may be set to None to clear it; None for any other field is ignored.

        Raises:
            NotFoundError: If the slug does not resolve.
        """
        existing = self.get_post(slug)

        merged = {name: getattr(existing, name) for name in _EDITABLE_FIELDS}
        for name, value in changes.items():
            if name not in _EDITABLE_FIELDS:
                continue
            if value is None and name != "header_image":
                continue
            merged[name] = value

        self.files.write(existing.file_path, format_blog_post(**merged))
        logger.info(f"Blog post updated: {slug} ({existing.status.value})")
        return self._load(slug, existing.file_path, existing.status)

    def archive_post(self, slug: str) -> BlogPost:
        """Move a live post to archive/<post year>/.

        Raises:
            NotFoundError: If the slug does not resolve.
            InvalidTransitionError: If the post is already archived.
            ConflictError: If the archive destination is taken.
        """
        post = self.get_post(slug)
        if post.status is PostStatus.ARCHIVED:
            raise InvalidTransitionError("Blog post is already archived", detail={"slug": slug})

        dst = self.files.post_path(PostStatus.ARCHIVED, post.year, slug)
        self._move(post, dst)
        logger.info(f"Blog post archived: {slug} -> archive/{post.year}")
        return self._load(slug, dst, PostStatus.ARCHIVED)

    def unarchive_post(self, slug: str) -> BlogPost:
        """Move an archived post to live/<current year>/.

        Raises:
            NotFoundError: If the slug does not resolve.
            InvalidTransitionError: If the post is live.
            ConflictError: If the live destination is taken.
        """
        post = self.get_post(slug)
        if post.status is PostStatus.LIVE:
            raise InvalidTransitionError("Blog post is not archived", detail={"slug": slug})

        year = self._clock().year
        dst = self.files.post_path(PostStatus.LIVE, year, slug)
        self._move(post, dst)
        logger.info(f"Blog post unarchived: {slug} -> live/{year}")
        return self._load(slug, dst, PostStatus.LIVE)

    def _move(self, post: BlogPost, dst: Path) -> None:
        if dst.exists():
            raise ConflictError(
                "Blog post with this slug already exists at destination",
                detail={"slug": post.slug, "path": str(dst.relative_to(self.files.root))},
            )
        self.files.move(post.file_path, dst)


@lru_cache
def get_blog_service() -> BlogService:
    """Get the blog service for the configured blog root."""
    settings = get_settings()
    return BlogService(BlogFiles(settings.blog_root), old_archive_days=settings.old_archive_days)
