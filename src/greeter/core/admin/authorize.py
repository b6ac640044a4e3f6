from __future__ import annotations

import hmac

import structlog

from greeter.core.admin.errors import AdminKeyNotConfiguredError, UnauthorizedError
from greeter.core.admin.shutdown import ShutdownRequest

log = structlog.get_logger()


def authorize_kill(
    *,
    expected_key: str | None,
    provided_key: str | None,
    exit_code: int = 1,
    delay_seconds: float = 0.1,
) -> ShutdownRequest:
    """
    Check the shared secret for the kill endpoint.

    Raises AdminKeyNotConfiguredError when no secret is configured and
    UnauthorizedError when the provided key is missing or differs.
    On success returns the ShutdownRequest the caller must act on.
    """
    if not expected_key:
        log.warning("admin.kill.rejected", reason="not_configured")
        raise AdminKeyNotConfiguredError()

    if provided_key is None or not hmac.compare_digest(
        provided_key.encode("utf-8"), expected_key.encode("utf-8")
    ):
        log.warning(
            "admin.kill.rejected",
            reason="missing_key" if provided_key is None else "key_mismatch",
        )
        raise UnauthorizedError()

    log.info("admin.kill.accepted", exit_code=exit_code, delay_seconds=delay_seconds)
    return ShutdownRequest(exit_code=exit_code, delay_seconds=delay_seconds)
