"""Filesystem store for blog markdown files.

Layout:
    <root>/live/<year>/<slug>.md
    <root>/archive/<year>/<slug>.md

There is no index: every lookup scans the year directories.
"""

from collections.abc import Iterator
from pathlib import Path

from portfolio.models import PostStatus

POST_SUFFIX = ".md"

_STATUS_DIRS = {
    PostStatus.LIVE: "live",
    PostStatus.ARCHIVED: "archive",
}


class BlogFiles:
    """Directory-layout operations over a blog root."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def status_dir(self, status: PostStatus) -> Path:
        return self.root / _STATUS_DIRS[status]

    def post_path(self, status: PostStatus, year: int, slug: str) -> Path:
        return self.status_dir(status) / str(year) / f"{slug}{POST_SUFFIX}"

    def year_dirs(self, status: PostStatus) -> list[Path]:
        """Year directories for a status, newest first. Missing root -> []."""
        base = self.status_dir(status)
        if not base.is_dir():
            return []
        return sorted((p for p in base.iterdir() if p.is_dir()), key=lambda p: p.name, reverse=True)

    def iter_posts(self, status: PostStatus) -> Iterator[tuple[str, Path]]:
        """Yield (slug, path) for every post file under a status tree."""
        for year_dir in self.year_dirs(status):
            for path in sorted(year_dir.iterdir()):
                if path.is_file() and path.suffix == POST_SUFFIX:
                    yield path.stem, path

    def find(self, slug: str) -> tuple[Path, PostStatus] | None:
        """Locate a slug: live years first, then archive years."""
        for status in (PostStatus.LIVE, PostStatus.ARCHIVED):
            for year_dir in self.year_dirs(status):
                candidate = year_dir / f"{slug}{POST_SUFFIX}"
                if candidate.is_file():
                    return candidate, status
        return None

    def read(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    def move(self, src: Path, dst: Path) -> None:
        """Move a post file, creating the destination year directory.

        Uses rename, so the file's mtime is preserved.
        """
        dst.parent.mkdir(parents=True, exist_ok=True)
        src.rename(dst)
