"""Blog endpoints.

GET    /v1/blog                 - list posts (newest first)
GET    /v1/blog/tags            - all tags
GET    /v1/blog/{slug}          - one post with body
POST   /v1/blog                 - create (admin)
PUT    /v1/blog/{slug}          - update (admin)
DELETE /v1/blog/{slug}          - archive, or ?action=unarchive (admin)

Routers are thin: call services for business logic. Handlers are plain
``def`` (blocking file I/O runs in the FastAPI threadpool).
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Path, Query

from portfolio.models import PostStatus
from portfolio.routes.deps import require_admin
from portfolio.schemas import (
    BlogListResponse,
    BlogPostDetail,
    BlogPostResponse,
    BlogPostSummary,
    BlogTagsResponse,
    CreateBlogPostRequest,
    UpdateBlogPostRequest,
)
from portfolio.services.blog import BlogPostDraft, get_blog_service
from portfolio.services.blog_format import generate_slug

router = APIRouter()

SlugPath = Annotated[
    str,
    Path(description="Post slug", min_length=1, max_length=200, pattern=r"^[a-z0-9][a-z0-9-]*$"),
]


@router.get("", response_model=BlogListResponse)
def list_posts(
    include_old_archived: bool = Query(
        default=False,
        alias="includeOldArchived",
        description="Include archived posts untouched for over a year",
    ),
    status: PostStatus | None = Query(default=None, description="Only live or archived posts"),
    tag: list[str] | None = Query(default=None, description="Posts with any of these tags"),
) -> BlogListResponse:
    """List posts sorted by last modification, live and archived interleaved."""
    posts = get_blog_service().list_posts(
        include_old_archived=include_old_archived,
        status=status,
        tags=tag,
    )
    return BlogListResponse(posts=[BlogPostSummary.from_post(p) for p in posts])


@router.get("/tags", response_model=BlogTagsResponse)
def list_tags() -> BlogTagsResponse:
    return BlogTagsResponse(tags=get_blog_service().list_tags())


@router.get("/{slug}", response_model=BlogPostResponse)
def get_post(slug: SlugPath) -> BlogPostResponse:
    """Get a post by slug.

    Raises:
        NotFoundError (404): If no post has this slug.
    """
    post = get_blog_service().get_post(slug)
    return BlogPostResponse(post=BlogPostDetail.from_post(post))


@router.post(
    "",
    response_model=BlogPostResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
def create_post(request: CreateBlogPostRequest) -> BlogPostResponse:
    """Create a live post; the slug is derived from the title.

    Raises:
        ConflictError (409): If the slug already exists this year.
    """
    post = get_blog_service().create_post(
        generate_slug(request.title),
        BlogPostDraft(
            title=request.title,
            description=request.description,
            content=request.content,
            header_image=request.header_image,
            tags=request.tags,
        ),
    )
    return BlogPostResponse(post=BlogPostDetail.from_post(post))


@router.put("/{slug}", response_model=BlogPostResponse, dependencies=[Depends(require_admin)])
def update_post(request: UpdateBlogPostRequest, slug: SlugPath) -> BlogPostResponse:
    """Update a post in place. Omitted fields keep their values."""
    post = get_blog_service().update_post(slug, request.model_dump(exclude_unset=True))
    return BlogPostResponse(post=BlogPostDetail.from_post(post))


@router.delete("/{slug}", response_model=BlogPostResponse, dependencies=[Depends(require_admin)])
def archive_post(
    slug: SlugPath,
    action: Literal["archive", "unarchive"] = Query(default="archive"),
) -> BlogPostResponse:
    """Archive a live post, or unarchive an archived one with ?action=unarchive.

    Raises:
        NotFoundError (404): If no post has this slug.
        InvalidTransitionError (400): If the post is already in the target state.
    """
    service = get_blog_service()
    if action == "unarchive":
        post = service.unarchive_post(slug)
    else:
        post = service.archive_post(slug)
    return BlogPostResponse(post=BlogPostDetail.from_post(post))
