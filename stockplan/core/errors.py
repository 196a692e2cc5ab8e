"""Errors raised by the manufacturing service client."""

from __future__ import annotations

import httpx

DEFAULT_ERROR_DETAIL = "Request failed"


class ServiceError(RuntimeError):
    """Non-2xx answer, or a body that is not JSON, from the manufacturing service.

    ``str(err)`` is the body text the service sent back, so callers can show
    it to the user as-is.
    """

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail or DEFAULT_ERROR_DETAIL
        super().__init__(self.detail)


# Anything a single service call can fail with; callers catch this tuple.
SERVICE_FAILURES = (ServiceError, httpx.HTTPError)
