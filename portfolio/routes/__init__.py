"""API routes."""

from fastapi import APIRouter

from portfolio.routes import blog, contact, projects, ui

api_router = APIRouter()

# UI endpoints (Home bootstrap)
api_router.include_router(ui.router, prefix="/v1/ui", tags=["ui"])

# Blog (public reads, admin writes)
api_router.include_router(blog.router, prefix="/v1/blog", tags=["blog"])

# Projects showcase (public reads, admin writes)
api_router.include_router(projects.router, prefix="/v1/projects", tags=["projects"])

# CAPTCHA-gated contact details
api_router.include_router(contact.router, prefix="/v1/contact", tags=["contact"])
