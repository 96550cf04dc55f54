"""Top-level API router: issue routes plus versioned sub-routers."""

from fastapi import APIRouter

from app.presentation.api.endpoints.issues import router as issues_router
from app.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(issues_router)
router.include_router(v1_router)
