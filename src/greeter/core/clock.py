from __future__ import annotations

import time
from datetime import datetime, timezone

import psutil
import structlog

log = structlog.get_logger()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime | None = None) -> str:
    """
    ISO-8601 UTC string with millisecond precision and a ``Z`` suffix,
    e.g. ``2026-10-18T12:00:00.123Z``.
    """
    moment = moment or utc_now()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def process_started_at() -> float:
    """
    Epoch seconds at which this process was created.

    Falls back to "now" if the OS refuses to report it, so uptime
    starts counting from the first call instead of failing.
    """
    try:
        return psutil.Process().create_time()
    except (psutil.Error, OSError) as e:
        log.warning("clock.process_start_unavailable", error=str(e))
        return time.time()


def uptime_seconds(started_at: float, *, now: float | None = None) -> int:
    now = time.time() if now is None else now
    return max(0, int(now - started_at))
