"""Flat-file blog post format.

A post file has a fixed 4-line header, a blank line, a ``--`` separator
and the markdown body:

    Title
    Description
    [[header-image]]
    #tag #another-tag

    --
    Body in markdown...

Lines 3 and 4 may be blank. Missing lines parse as empty values.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
import re

from portfolio.models import BlogPost, PostStatus

SEPARATOR = "--"

_IMAGE_RE = re.compile(r"\[\[(.+?)\]\]")
_TAG_TOKEN_RE = re.compile(r"#(\w[\w-]*)")
_TAG_RE = re.compile(r"\w[\w-]*")
_PATH_SEP_RE = re.compile(r"[\\/]")
_YEAR_RE = re.compile(r"\d{4}")
_SLUG_STRIP_RE = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str) -> str:
    """Generate a URL-safe slug from a title.

    Example: "Hello World" -> "hello-world"
    """
    return _SLUG_STRIP_RE.sub("-", title.lower()).strip("-")


def is_valid_header_image(name: str) -> bool:
    """True if ``[[name]]`` parses back to ``name``."""
    return "]]" not in name and not name.endswith("]")


def is_valid_tag(tag: str) -> bool:
    """True if a tag survives a format/parse round trip."""
    return _TAG_RE.fullmatch(tag) is not None


def parse_tags(line: str) -> list[str]:
    """Parse a ``#tag #tag`` line. Invalid tokens are ignored, duplicates dropped."""
    tags: list[str] = []
    for token in line.split():
        match = _TAG_TOKEN_RE.fullmatch(token)
        if match and match.group(1) not in tags:
            tags.append(match.group(1))
    return tags


def year_from_path(path: Path | str, *, default: int) -> int:
    """Year of the directory directly holding the post file.

    Only the parent segment counts, so year-like names higher up the blog
    root are ignored.
    """
    parts = _PATH_SEP_RE.split(str(path))
    if len(parts) >= 2 and _YEAR_RE.fullmatch(parts[-2]):
        return int(parts[-2])
    return default


def parse_blog_post(
    text: str,
    slug: str,
    path: Path,
    status: PostStatus,
    *,
    now: datetime | None = None,
) -> BlogPost:
    """Parse raw file text into a BlogPost.

    Timestamps are left unset; the store fills them from the file's stat().
    """
    lines = text.split("\n")

    def line(index: int) -> str:
        return lines[index].strip() if index < len(lines) else ""

    image_match = _IMAGE_RE.search(line(2))

    content = ""
    for index, raw in enumerate(lines):
        if raw.strip() == SEPARATOR:
            content = "\n".join(lines[index + 1 :]).strip()
            break

    current_year = (now or datetime.now()).year
    return BlogPost(
        slug=slug,
        title=line(0),
        description=line(1),
        header_image=image_match.group(1) if image_match else None,
        tags=parse_tags(line(3)),
        content=content,
        file_path=path,
        year=year_from_path(path, default=current_year),
        status=status,
    )


def format_blog_post(
    *,
    title: str,
    description: str,
    content: str,
    header_image: str | None = None,
    tags: list[str] | None = None,
) -> str:
    """Format post fields into file text (inverse of ``parse_blog_post``)."""
    lines = [
        title,
        description,
        f"[[{header_image}]]" if header_image else "",
        " ".join(f"#{tag}" for tag in tags) if tags else "",
        "",
        SEPARATOR,
        content,
    ]
    return "\n".join(lines)
