from __future__ import annotations

from fastapi import APIRouter, Request

from ..config import AppConfig
from ..models.system import ApiStatus, SystemReport
from ..services.liveness import check_api_alive
from ..services.report import build_report

router = APIRouter(prefix="/system", tags=["system"])


# Plain def: FastAPI runs it in the threadpool so the blocking subprocess probes stay off the event loop.
@router.get("/info", response_model=SystemReport)
def get_system_info(request: Request) -> SystemReport:
    settings: AppConfig = request.app.state.settings
    return build_report(request.app.state.command_executor, settings)


@router.get("/ollama-api", response_model=ApiStatus)
async def check_ollama_api(request: Request) -> ApiStatus:
    settings: AppConfig = request.app.state.settings
    alive = await check_api_alive(settings=settings, transport=request.app.state.http_transport)
    return ApiStatus(alive=alive, url=settings.api_version_url)
