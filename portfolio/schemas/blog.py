"""Schemas for the blog endpoints (/v1/blog)."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from portfolio.models import BlogPost, PostStatus
from portfolio.services.blog_format import SEPARATOR, is_valid_header_image, is_valid_tag


def _single_line(value: str | None) -> str | None:
    """Header fields occupy one line of the post file."""
    if value is None:
        return None
    value = value.strip()
    if "\n" in value or "\r" in value:
        raise ValueError("must be a single line")
    if value == SEPARATOR:
        raise ValueError(f"cannot be '{SEPARATOR}'")
    return value


def _header_image(value: str | None) -> str | None:
    value = _single_line(value)
    if value and not is_valid_header_image(value):
        raise ValueError("cannot contain ']]' or end with ']'")
    return value


def _strip(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


def _normalize_tags(tags: list[str] | None) -> list[str] | None:
    if tags is None:
        return None
    out: list[str] = []
    for raw in tags:
        tag = raw.strip().lstrip("#")
        if not tag:
            continue
        if not is_valid_tag(tag):
            raise ValueError(f"invalid tag: {raw!r}")
        if tag not in out:
            out.append(tag)
    return out


class BlogPostSummary(BaseModel):
    """A post without its body (list views)."""

    slug: str
    title: str
    description: str
    header_image: str | None = Field(alias="headerImage", default=None)
    tags: list[str] = Field(default_factory=list)
    year: int
    status: PostStatus
    created_at: datetime | None = Field(alias="createdAt", default=None)
    updated_at: datetime | None = Field(alias="updatedAt", default=None)
    archived_at: datetime | None = Field(alias="archivedAt", default=None)
    is_old_archived: bool = Field(alias="isOldArchived", default=False)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_post(cls, post: BlogPost) -> "BlogPostSummary":
        return cls(
            slug=post.slug,
            title=post.title,
            description=post.description,
            header_image=post.header_image,
            tags=post.tags,
            year=post.year,
            status=post.status,
            created_at=post.created_at,
            updated_at=post.updated_at,
            archived_at=post.archived_at,
            is_old_archived=post.is_old_archived,
        )


class BlogPostDetail(BlogPostSummary):
    """A full post including its markdown body."""

    content: str

    @classmethod
    def from_post(cls, post: BlogPost) -> "BlogPostDetail":
        summary = BlogPostSummary.from_post(post)
        return cls(**summary.model_dump(), content=post.content)


class CreateBlogPostRequest(BaseModel):
    """Request body for POST /v1/blog."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=500)
    header_image: str | None = Field(alias="headerImage", default=None)
    tags: list[str] = Field(default_factory=list)
    content: str = Field(min_length=1)

    model_config = {"populate_by_name": True}

    @field_validator("title", "description", "header_image", mode="before")
    @classmethod
    def _strip_header_fields(cls, v: object) -> object:
        return _strip(v)

    @field_validator("title", "description")
    @classmethod
    def _check_single_line(cls, v: str | None) -> str | None:
        return _single_line(v)

    @field_validator("header_image")
    @classmethod
    def _check_header_image(cls, v: str | None) -> str | None:
        return _header_image(v)

    @field_validator("tags")
    @classmethod
    def _check_tags(cls, v: list[str] | None) -> list[str] | None:
        return _normalize_tags(v)


class UpdateBlogPostRequest(BaseModel):
    """Request body for PUT /v1/blog/{slug}. Omitted fields are kept."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1, max_length=500)
    header_image: str | None = Field(alias="headerImage", default=None)
    tags: list[str] | None = None
    content: str | None = None

    model_config = {"populate_by_name": True}

    @field_validator("title", "description", "header_image", mode="before")
    @classmethod
    def _strip_header_fields(cls, v: object) -> object:
        return _strip(v)

    @field_validator("title", "description")
    @classmethod
    def _check_single_line(cls, v: str | None) -> str | None:
        return _single_line(v)

    @field_validator("header_image")
    @classmethod
    def _check_header_image(cls, v: str | None) -> str | None:
        return _header_image(v)

    @field_validator("tags")
    @classmethod
    def _check_tags(cls, v: list[str] | None) -> list[str] | None:
        return _normalize_tags(v)


class BlogPostResponse(BaseModel):
    success: bool = True
    post: BlogPostDetail


class BlogListResponse(BaseModel):
    success: bool = True
    posts: list[BlogPostSummary]


class BlogTagsResponse(BaseModel):
    success: bool = True
    tags: list[str]
