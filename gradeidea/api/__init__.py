"""API router for v1 endpoints."""

from fastapi import APIRouter

from gradeidea.api import checklists, scores

router = APIRouter()

router.include_router(checklists.router, tags=["checklists"])
router.include_router(scores.router, tags=["scores"])
