"""Projects service: CRUD over data/projects.json.

The whole array is read and rewritten on every mutation.
"""

from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path
import re
from typing import Any

from portfolio.errors import ConflictError, DomainValidationError, NotFoundError
from portfolio.schemas.projects import Project, ProjectCategory
from portfolio.settings import get_settings
from portfolio.stores.json_file import read_json_array, write_json_array

logger = logging.getLogger("uvicorn.error")

_UPDATABLE_FIELDS = ("title", "description", "tech", "link", "image", "category")


def generate_project_id(title: str) -> str:
    """Generate a project id from its title.

    Example: "My Cool App!" -> "my-cool-app"
    """
    s = re.sub(r"[^a-z0-9\s-]", "", title.lower())
    s = re.sub(r"\s+", "-", s)
    s = re.sub(r"-+", "-", s)
    return s.strip("-")


class ProjectService:
    """Project operations over a single JSON array file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _load(self) -> list[Project]:
        return [Project.model_validate(item) for item in read_json_array(self.path)]

    def _save(self, projects: list[Project]) -> None:
        write_json_array(self.path, [p.model_dump(mode="json") for p in projects])

    def list_projects(
        self,
        *,
        category: ProjectCategory | None = None,
        tech: str | None = None,
    ) -> list[Project]:
        """List projects in file order, optionally filtered.

        Args:
            category: Only projects in this category.
            tech: Only projects using this technology (case-insensitive).
        """
        projects = self._load()
        if category is not None:
            projects = [p for p in projects if p.category == category]
        if tech:
            wanted = tech.lower()
            projects = [p for p in projects if any(t.lower() == wanted for t in p.tech)]
        return projects

    def get_project(self, project_id: str) -> Project:
        for project in self._load():
            if project.id == project_id:
                return project
        raise NotFoundError("Project not found", detail={"id": project_id})

    def create_project(self, data: dict[str, Any]) -> Project:
        """Create a project; its id is derived from the title.

        Raises:
            DomainValidationError: If the title yields an empty id.
            ConflictError: If a project with the same id exists.
        """
        project_id = generate_project_id(data["title"])
        if not project_id:
            raise DomainValidationError("Cannot derive a project id from the title")

        projects = self._load()
        if any(p.id == project_id for p in projects):
            raise ConflictError("Project with this title already exists", detail={"id": project_id})

        project = Project.model_validate({**data, "id": project_id})
        projects.append(project)
        self._save(projects)
        logger.info(f"Project created: {project_id}")
        return project

    def update_project(self, project_id: str, changes: dict[str, Any]) -> Project:
        """Merge ``changes`` over a project, keeping its id.

        None values are ignored, except ``image`` which may be cleared with "".
        """
        projects = self._load()
        for index, project in enumerate(projects):
            if project.id == project_id:
                break
        else:
            raise NotFoundError("Project not found", detail={"id": project_id})

        patch = {
            k: v for k, v in changes.items() if k in _UPDATABLE_FIELDS and v is not None
        }
        updated = Project.model_validate({**project.model_dump(), **patch})
        projects[index] = updated
        self._save(projects)
        logger.info(f"Project updated: {project_id} ({', '.join(sorted(patch)) or 'no changes'})")
        return updated

    def delete_project(self, project_id: str) -> Project:
        """Remove a project and return it."""
        projects = self._load()
        for index, project in enumerate(projects):
            if project.id == project_id:
                del projects[index]
                self._save(projects)
                logger.info(f"Project deleted: {project_id}")
                return project
        raise NotFoundError("Project not found", detail={"id": project_id})

    def category_counts(self) -> dict[str, int]:
        counts = {category.value: 0 for category in ProjectCategory}
        for project in self._load():
            counts[project.category.value] += 1
        return counts


@lru_cache
def get_project_service() -> ProjectService:
    """Get the project service for the configured projects file."""
    return ProjectService(get_settings().projects_file)
