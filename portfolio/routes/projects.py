"""Projects endpoints.

GET    /v1/projects         - list (optional category / tech filters)
GET    /v1/projects/{id}    - one project
POST   /v1/projects         - create (admin)
PUT    /v1/projects/{id}    - update, id kept (admin)
DELETE /v1/projects/{id}    - delete (admin)
"""

from fastapi import APIRouter, Depends, Query

from portfolio.routes.deps import require_admin
from portfolio.schemas import (
    CreateProjectRequest,
    ProjectCategory,
    ProjectListResponse,
    ProjectResponse,
    UpdateProjectRequest,
)
from portfolio.services.projects import get_project_service

router = APIRouter()


@router.get("", response_model=ProjectListResponse)
def list_projects(
    category: ProjectCategory | None = Query(default=None, description="Showcase category"),
    tech: str | None = Query(default=None, description="Technology tag, case-insensitive"),
) -> ProjectListResponse:
    projects = get_project_service().list_projects(category=category, tech=tech)
    return ProjectListResponse(data=projects)


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: str) -> ProjectResponse:
    return ProjectResponse(data=get_project_service().get_project(project_id))


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
def create_project(request: CreateProjectRequest) -> ProjectResponse:
    """Create a project; its id is derived from the title.

    Raises:
        ConflictError (409): If a project with the same id exists.
    """
    project = get_project_service().create_project(request.model_dump(mode="json"))
    return ProjectResponse(data=project)


@router.put("/{project_id}", response_model=ProjectResponse, dependencies=[Depends(require_admin)])
def update_project(project_id: str, request: UpdateProjectRequest) -> ProjectResponse:
    project = get_project_service().update_project(
        project_id, request.model_dump(mode="json", exclude_unset=True)
    )
    return ProjectResponse(data=project)


@router.delete("/{project_id}", response_model=ProjectResponse, dependencies=[Depends(require_admin)])
def delete_project(project_id: str) -> ProjectResponse:
    return ProjectResponse(data=get_project_service().delete_project(project_id))
