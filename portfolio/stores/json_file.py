"""JSON array file store (used for data/projects.json)."""

import json
from pathlib import Path
from typing import Any


def read_json_array(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array file. A missing file reads as an empty array."""
    if not path.exists():
        return []
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {path}")
    return data


def write_json_array(path: Path, items: list[dict[str, Any]]) -> None:
    """Write a JSON array file (2-space indent, UTF-8)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(items, f, indent=2, ensure_ascii=False)


def read_json_object(path: Path) -> dict[str, Any]:
    """Read a JSON object file (config files)."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def write_json_object(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
