"""API router for v1 endpoints."""

from fastapi import APIRouter

from app.api import kb_score

router = APIRouter()

# Include KB scoring routes
router.include_router(kb_score.router, tags=["kb_score"])
