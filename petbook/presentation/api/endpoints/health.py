"""Health check: the store is reachable and both collections answer."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from petbook.config import get_settings
from petbook.infrastructure.database import CatModel, DogModel, engine

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


async def _count_collections() -> dict[str, int]:
    counts: dict[str, int] = {}
    async with engine.connect() as conn:
        for model in (CatModel, DogModel):
            result = await conn.execute(select(func.count()).select_from(model))
            counts[model.__tablename__] = result.scalar_one()
    return counts


@router.get("/health")
async def health_check() -> JSONResponse:
    """200 with per-collection record counts, or 503 when the store fails."""
    settings = get_settings()
    body: dict = {"version": settings.app_version, "environment": settings.app_env}
    try:
        body["collections"] = await _count_collections()
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Health check: store unavailable: %s", exc)
        body["status"] = "degraded"
        return JSONResponse(content=body, status_code=503)
    body["status"] = "ok"
    return JSONResponse(content=body)
