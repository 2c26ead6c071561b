"""Schemas for the Home UI endpoint (/v1/ui/home)."""

from pydantic import BaseModel, Field

from portfolio.schemas.blog import BlogPostSummary
from portfolio.schemas.projects import Project


class HomeResponse(BaseModel):
    """Response payload for GET /v1/ui/home.

    Matches the UI structure: recent posts + project showcase.
    """

    recent_posts: list[BlogPostSummary] = Field(alias="recentPosts", default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    project_counts: dict[str, int] = Field(alias="projectCounts", default_factory=dict)

    model_config = {"populate_by_name": True}
