"""Tests for the projects service and endpoints."""

import json
from pathlib import Path

import pytest
from httpx import AsyncClient

from portfolio.errors import ConflictError, NotFoundError
from portfolio.schemas import ProjectCategory
from portfolio.services.projects import ProjectService, generate_project_id

PROJECT = {
    "title": "Weather Dashboard",
    "description": "Forecasts on a map",
    "tech": ["Python", "FastAPI"],
    "link": "https://example.com/weather",
    "category": "real-world",
}


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Weather Dashboard", "weather-dashboard"),
        ("My Cool App!", "my-cool-app"),
        ("  spaced   out  ", "spaced-out"),
        ("a -- b", "a-b"),
    ],
)
def test_generate_project_id(title: str, expected: str):
    assert generate_project_id(title) == expected


def test_service_crud_round(tmp_path: Path):
    service = ProjectService(tmp_path / "projects.json")
    assert service.list_projects() == []

    created = service.create_project(PROJECT)
    assert created.id == "weather-dashboard"
    assert created.image == ""
    assert created.category is ProjectCategory.REAL_WORLD

    with pytest.raises(ConflictError):
        service.create_project(PROJECT)

    updated = service.update_project("weather-dashboard", {"title": "Renamed", "link": None})
    assert updated.id == "weather-dashboard"
    assert updated.title == "Renamed"
    assert updated.link == PROJECT["link"]

    stored = json.loads((tmp_path / "projects.json").read_text(encoding="utf-8"))
    assert stored[0]["title"] == "Renamed"
    assert stored[0]["category"] == "real-world"

    deleted = service.delete_project("weather-dashboard")
    assert deleted.title == "Renamed"
    assert service.list_projects() == []

    with pytest.raises(NotFoundError):
        service.delete_project("weather-dashboard")


def test_service_filters(tmp_path: Path):
    service = ProjectService(tmp_path / "projects.json")
    service.create_project(PROJECT)
    service.create_project({**PROJECT, "title": "Pong", "tech": ["Lua"], "category": "games"})

    assert [p.id for p in service.list_projects(category=ProjectCategory.GAMES)] == ["pong"]
    assert [p.id for p in service.list_projects(tech="fastapi")] == ["weather-dashboard"]
    assert service.category_counts() == {"real-world": 1, "personal": 0, "games": 1}


@pytest.mark.asyncio
async def test_projects_endpoints(client: AsyncClient, admin_headers: dict[str, str]):
    response = await client.post("/v1/projects", json=PROJECT)
    assert response.status_code == 401

    response = await client.post("/v1/projects", json=PROJECT, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["data"]["id"] == "weather-dashboard"

    response = await client.post("/v1/projects", json=PROJECT, headers=admin_headers)
    assert response.status_code == 409

    response = await client.get("/v1/projects", params={"category": "real-world"})
    assert [p["id"] for p in response.json()["data"]] == ["weather-dashboard"]

    response = await client.put(
        "/v1/projects/weather-dashboard",
        json={"image": "/img/weather.png", "category": "personal"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["image"] == "/img/weather.png"
    assert data["category"] == "personal"
    assert data["tech"] == ["Python", "FastAPI"]

    response = await client.get("/v1/projects/weather-dashboard")
    assert response.status_code == 200
    assert response.json()["data"]["category"] == "personal"

    response = await client.delete("/v1/projects/weather-dashboard", headers=admin_headers)
    assert response.status_code == 200

    response = await client.get("/v1/projects/weather-dashboard")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_project_rejects_unknown_category(client: AsyncClient, admin_headers: dict[str, str]):
    response = await client.post(
        "/v1/projects",
        json={**PROJECT, "category": "hobby"},
        headers=admin_headers,
    )
    assert response.status_code == 422
