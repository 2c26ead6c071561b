#!/usr/bin/env python3
"""Seed content directories with initial data.

Creates:
- blog/live and blog/archive trees with a welcome post
- data/projects.json with sample projects
- config/blog-auth.json (random admin key) and config/contact.json

Seed script is idempotent: existing files, posts and projects are left alone.

Usage:
    python -m scripts.seed
"""

import os
import secrets
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from portfolio.errors import ConflictError  # noqa: E402
from portfolio.models import PostStatus  # noqa: E402
from portfolio.services.blog import BlogPostDraft, get_blog_service  # noqa: E402
from portfolio.services.blog_format import generate_slug  # noqa: E402
from portfolio.services.projects import get_project_service  # noqa: E402
from portfolio.settings import get_settings  # noqa: E402
from portfolio.stores.json_file import write_json_array, write_json_object  # noqa: E402

# ============================================================
# Sample content
# ============================================================

SAMPLE_POSTS = [
    BlogPostDraft(
        title="Hello World",
        description="First post on the new site",
        tags=["meta", "intro"],
        content="Welcome! This blog is a folder of markdown files.\n\nMore soon.",
    ),
]

SAMPLE_PROJECTS = [
    {
        "title": "Portfolio Site",
        "description": "This website: blog, projects and a contact form",
        "tech": ["Python", "FastAPI"],
        "link": "https://example.com",
        "image": "",
        "category": "personal",
    },
]

SAMPLE_CONTACT = {
    "email": "me@example.com",
    "phone": "",
    "location": "",
}


def seed_layout() -> None:
    """Create blog trees, the projects file and config files."""
    settings = get_settings()
    files = get_blog_service().files
    for status in PostStatus:
        files.status_dir(status).mkdir(parents=True, exist_ok=True)

    if not settings.projects_file.exists():
        write_json_array(settings.projects_file, [])
        print(f"  ✓ {settings.projects_file}")

    if not settings.admin_auth_file.exists():
        key = secrets.token_urlsafe(24)
        write_json_object(settings.admin_auth_file, {"adminApiKey": key})
        print(f"  ✓ {settings.admin_auth_file} (adminApiKey={key})")

    if not settings.contact_file.exists():
        write_json_object(settings.contact_file, SAMPLE_CONTACT)
        print(f"  ✓ {settings.contact_file}")


def seed_posts() -> None:
    service = get_blog_service()
    for draft in SAMPLE_POSTS:
        slug = generate_slug(draft.title)
        try:
            service.create_post(slug, draft)
            print(f"  ✓ post {slug}")
        except ConflictError:
            print(f"  - post {slug} already exists")


def seed_projects() -> None:
    service = get_project_service()
    for data in SAMPLE_PROJECTS:
        try:
            project = service.create_project(data)
            print(f"  ✓ project {project.id}")
        except ConflictError:
            print(f"  - project {data['title']!r} already exists")


def main() -> None:
    load_dotenv()
    print("Seeding content...")
    seed_layout()
    seed_posts()
    seed_projects()
    print("Done.")


if __name__ == "__main__":
    main()
