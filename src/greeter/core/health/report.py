from __future__ import annotations

import os
import platform
import socket
import sys
from typing import Literal

import psutil
import structlog
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from greeter.core.clock import iso_timestamp, uptime_seconds

log = structlog.get_logger()


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MemoryUsage(_CamelModel):
    """
    Resident and virtual memory of this process, in bytes.
    """

    rss: int = 0
    vms: int = 0


class InstanceInfo(_CamelModel):
    hostname: str
    pid: int
    platform: str
    runtime_version: str
    memory: MemoryUsage


class ClusterInfo(_CamelModel):
    """
    Placeholders for a future orchestration control plane.

    Always null: this service has no view of its siblings.
    """

    total_instances: int | None = None
    running_instances: int | None = None
    stopped_instances: int | None = None
    starting_instances: int | None = None


class HealthReport(_CamelModel):
    status: Literal["ok"] = "ok"
    timestamp: str
    uptime_seconds: int
    instance: InstanceInfo
    cluster: ClusterInfo


# =========================
# OS queries
# =========================

def _hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as e:
        log.warning("health.hostname_unavailable", error=str(e))
        return ""


def _memory_usage() -> MemoryUsage:
    try:
        info = psutil.Process().memory_info()
    except (psutil.Error, OSError) as e:
        log.warning("health.memory_unavailable", error=str(e))
        return MemoryUsage()
    return MemoryUsage(rss=info.rss, vms=info.vms)


def instance_info() -> InstanceInfo:
    return InstanceInfo(
        hostname=_hostname(),
        pid=os.getpid(),
        platform=sys.platform,
        runtime_version=platform.python_version(),
        memory=_memory_usage(),
    )


def build_health_report(*, started_at: float) -> HealthReport:
    """
    Assemble a fresh health report for this process.

    Never raises on OS query failures; unavailable values degrade to
    empty strings / zeros.
    """
    return HealthReport(
        timestamp=iso_timestamp(),
        uptime_seconds=uptime_seconds(started_at),
        instance=instance_info(),
        cluster=ClusterInfo(),
    )
