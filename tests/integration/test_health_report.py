from __future__ import annotations

import os
import socket
import sys
from datetime import datetime

import psutil
import pytest
from fastapi.testclient import TestClient

from greeter.app.main import create_app
from greeter.core.clock import uptime_seconds
from greeter.core.config.settings import AppSettings
from greeter.core.health import report as health_report

CLUSTER_KEYS = ("totalInstances", "runningInstances", "stoppedInstances", "startingInstances")


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(settings=AppSettings(admin_api_key=None)))


def test_health_report_shape(client: TestClient) -> None:
    response = client.get("/api/v1/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["status"] == "ok"
    assert datetime.fromisoformat(payload["timestamp"]).tzinfo is not None
    assert isinstance(payload["uptimeSeconds"], int)
    assert payload["uptimeSeconds"] >= 0

    instance = payload["instance"]
    assert instance["pid"] == os.getpid()
    assert instance["platform"] == sys.platform
    assert instance["runtimeVersion"]
    assert isinstance(instance["hostname"], str)
    assert instance["memory"]["rss"] > 0

    for key in CLUSTER_KEYS:
        assert key in payload["cluster"]
        assert payload["cluster"][key] is None


def test_repeated_health_calls_do_not_drift(client: TestClient) -> None:
    first = client.get("/api/v1/health").json()
    second = client.get("/api/v1/health").json()

    # Only the clock-derived values may move, and only forward
    assert second["uptimeSeconds"] >= first["uptimeSeconds"]
    assert datetime.fromisoformat(second["timestamp"]) >= datetime.fromisoformat(first["timestamp"])
    assert second["instance"]["pid"] == first["instance"]["pid"]
    assert second["instance"]["hostname"] == first["instance"]["hostname"]
    assert second["cluster"] == first["cluster"]


def test_hostname_failure_degrades_to_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_gethostname() -> str:
        raise OSError("no hostname")

    monkeypatch.setattr(socket, "gethostname", broken_gethostname)

    report = health_report.build_health_report(started_at=0.0)
    assert report.instance.hostname == ""
    assert report.status == "ok"


def test_memory_failure_degrades_to_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    class DeniedProcess:
        def memory_info(self):
            raise psutil.AccessDenied()

    monkeypatch.setattr(health_report.psutil, "Process", DeniedProcess)

    report = health_report.build_health_report(started_at=0.0)
    assert report.instance.memory.rss == 0
    assert report.instance.memory.vms == 0

    # Still serializable with camelCase keys
    dumped = report.model_dump(by_alias=True)
    assert dumped["instance"]["memory"] == {"rss": 0, "vms": 0}
    assert dumped["cluster"]["totalInstances"] is None


def test_uptime_is_whole_non_negative_seconds() -> None:
    assert uptime_seconds(100.0, now=165.9) == 65
    # Clock skew never produces a negative uptime
    assert uptime_seconds(200.0, now=100.0) == 0
