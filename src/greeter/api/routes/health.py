from __future__ import annotations

from fastapi import APIRouter, Depends

from greeter.api.deps import process_started_at
from greeter.core.health.report import HealthReport, build_health_report

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthReport,
    summary="Instance health report",
)
def health(started_at: float = Depends(process_started_at)) -> HealthReport:
    """
    Always 200. Side-effect free; cluster fields are null placeholders.
    """
    return build_health_report(started_at=started_at)
