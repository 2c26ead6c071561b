"""Schemas for the projects endpoints (/v1/projects)."""

from enum import Enum

from pydantic import BaseModel, Field


class ProjectCategory(str, Enum):
    """Showcase section a project is listed under."""

    REAL_WORLD = "real-world"
    PERSONAL = "personal"
    GAMES = "games"


class Project(BaseModel):
    """A project as stored in data/projects.json."""

    id: str
    title: str
    description: str
    tech: list[str] = Field(default_factory=list)
    link: str
    image: str = ""
    category: ProjectCategory


class CreateProjectRequest(BaseModel):
    """Request body for POST /v1/projects."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    tech: list[str]
    link: str = Field(min_length=1)
    image: str = ""
    category: ProjectCategory


class UpdateProjectRequest(BaseModel):
    """Request body for PUT /v1/projects/{id}. Omitted fields are kept."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    tech: list[str] | None = None
    link: str | None = Field(default=None, min_length=1)
    image: str | None = None
    category: ProjectCategory | None = None


class ProjectResponse(BaseModel):
    success: bool = True
    data: Project


class ProjectListResponse(BaseModel):
    success: bool = True
    data: list[Project]
