from __future__ import annotations

from fastapi import Request

from greeter.core.admin.shutdown import ShutdownScheduler
from greeter.core.config.settings import AppSettings


# Everything here is placed on app.state by create_app().

def app_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def shutdown_scheduler(request: Request) -> ShutdownScheduler:
    return request.app.state.shutdown_scheduler


def process_started_at(request: Request) -> float:
    return request.app.state.started_at
