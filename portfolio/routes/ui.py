"""UI bootstrap endpoints.

GET /v1/ui/home - Returns HomeResponse for the landing page.

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Query

from portfolio.models import PostStatus
from portfolio.schemas import BlogPostSummary, HomeResponse
from portfolio.services.blog import get_blog_service
from portfolio.services.projects import get_project_service
from portfolio.settings import get_settings

router = APIRouter()


@router.get("/home", response_model=HomeResponse)
def get_home(
    posts: int | None = Query(
        default=None,
        ge=0,
        le=20,
        description="Number of recent live posts (defaults to HOME_RECENT_POSTS)",
    ),
) -> HomeResponse:
    """Get landing page data: latest live posts and the project showcase."""
    limit = posts if posts is not None else get_settings().home_recent_posts

    recent = get_blog_service().list_posts(status=PostStatus.LIVE)[:limit]
    project_service = get_project_service()

    return HomeResponse(
        recent_posts=[BlogPostSummary.from_post(p) for p in recent],
        projects=project_service.list_projects(),
        project_counts=project_service.category_counts(),
    )
