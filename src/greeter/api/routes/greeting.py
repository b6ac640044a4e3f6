from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from greeter.core.clock import iso_timestamp

# Mounted at the application root, outside /api/v1
root_router = APIRouter(tags=["greeting"])

router = APIRouter(tags=["greeting"])


@root_router.get("/", response_class=PlainTextResponse, summary="Time-stamped greeting")
def hello_world() -> str:
    return f"Hello World {iso_timestamp()}"


# Fixed text: not time-of-day sensitive despite the name.
@router.get("/hello", response_class=PlainTextResponse, summary="Fixed greeting")
def hello() -> str:
    return "Good Afternoon"
