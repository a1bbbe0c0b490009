"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(request: Request) -> dict[str, str | int]:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        return {"status": "starting", "cutoffs": 0}
    return {"status": "ready", "cutoffs": len(engine.cutoffs)}
