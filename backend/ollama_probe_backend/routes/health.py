from __future__ import annotations

from fastapi import APIRouter

from ..services.system import resolve_platform, system_probe

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok", "detail": system_probe(), "platform": resolve_platform().os}
