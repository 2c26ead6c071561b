"""Pydantic schemas for API request/response validation."""

from portfolio.schemas.blog import (
    BlogListResponse,
    BlogPostDetail,
    BlogPostResponse,
    BlogPostSummary,
    BlogTagsResponse,
    CreateBlogPostRequest,
    UpdateBlogPostRequest,
)
from portfolio.schemas.common import ErrorDetail, ErrorResponse
from portfolio.schemas.contact import (
    CaptchaChallengeResponse,
    CaptchaVerifyRequest,
    ContactInfoResponse,
)
from portfolio.schemas.home import HomeResponse
from portfolio.schemas.projects import (
    CreateProjectRequest,
    Project,
    ProjectCategory,
    ProjectListResponse,
    ProjectResponse,
    UpdateProjectRequest,
)

__all__ = [
    "BlogListResponse",
    "BlogPostDetail",
    "BlogPostResponse",
    "BlogPostSummary",
    "BlogTagsResponse",
    "CreateBlogPostRequest",
    "UpdateBlogPostRequest",
    "ErrorDetail",
    "ErrorResponse",
    "CaptchaChallengeResponse",
    "CaptchaVerifyRequest",
    "ContactInfoResponse",
    "HomeResponse",
    "CreateProjectRequest",
    "Project",
    "ProjectCategory",
    "ProjectListResponse",
    "ProjectResponse",
    "UpdateProjectRequest",
]
