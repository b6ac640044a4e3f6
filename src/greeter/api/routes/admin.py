from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, Header
from pydantic import BaseModel

from greeter.api.deps import app_settings, shutdown_scheduler
from greeter.core.admin.authorize import authorize_kill
from greeter.core.admin.shutdown import ShutdownScheduler
from greeter.core.config.settings import AppSettings

router = APIRouter(tags=["admin"])


class KillResponse(BaseModel):
    message: str


class AdminErrorResponse(BaseModel):
    error: str


@router.post(
    "/admin/kill",
    response_model=KillResponse,
    summary="Terminate the process (test-only)",
    responses={
        401: {"model": AdminErrorResponse},
        500: {"model": AdminErrorResponse},
    },
)
def kill(
    background_tasks: BackgroundTasks,
    x_api_key: str | None = Header(default=None),
    settings: AppSettings = Depends(app_settings),
    scheduler: ShutdownScheduler = Depends(shutdown_scheduler),
) -> KillResponse:
    request = authorize_kill(
        expected_key=settings.admin_api_key,
        provided_key=x_api_key,
        exit_code=settings.shutdown_exit_code,
        delay_seconds=settings.shutdown_delay_seconds,
    )

    # Background tasks start only after the response has been sent
    background_tasks.add_task(scheduler.execute, request)

    return KillResponse(message="Server will shut down now for test purposes")
