from __future__ import annotations


class DashboardError(RuntimeError):
    """Base exception for failures surfaced to API callers and views."""

    code: str = "error"
    status_code: int = 500


class Unauthorized(DashboardError):
    """Caller did not present an accepted shared secret."""

    code = "unauthorized"
    status_code = 403


class DependencyMissing(DashboardError):
    """The option store backing the site settings is not available."""

    code = "acf_missing"
    status_code = 500


class NotFound(DashboardError):
    """No entity exists for the requested id."""

    code = "not_found"
    status_code = 404


class TransportFailure(DashboardError):
    """HTTP/network/parse failures seen by the API client (timeouts, non-2xx, bad JSON)."""

    code = "transport_failure"
    status_code = 502

    def __init__(self, message: str, *, http_status: int | None = None) -> None:
        super().__init__(message)
        self.http_status = http_status
