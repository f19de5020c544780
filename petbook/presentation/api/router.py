"""Top-level router: the fixed route table, catch-all registered last."""

from fastapi import APIRouter

from petbook.presentation.api.endpoints.health import router as health_router
from petbook.presentation.api.endpoints.not_found import router as not_found_router
from petbook.presentation.api.endpoints.pages import router as pages_router
from petbook.presentation.api.endpoints.pets import router as pets_router

router = APIRouter()
router.include_router(pages_router)
router.include_router(pets_router)
router.include_router(health_router)
router.include_router(not_found_router)
