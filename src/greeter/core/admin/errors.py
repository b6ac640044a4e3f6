from __future__ import annotations


class AdminError(Exception):
    """
    Base class for admin endpoint failures.

    Carries the HTTP status and the public message rendered as
    ``{"error": message}``.
    """

    status_code: int = 500
    message: str = "Admin request failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AdminKeyNotConfiguredError(AdminError):
    """
    Server-side misconfiguration: no admin secret is set.
    """

    status_code = 500
    message = "ADMIN_API_KEY is not configured on the server"


class UnauthorizedError(AdminError):
    status_code = 401
    message = "Unauthorized"
