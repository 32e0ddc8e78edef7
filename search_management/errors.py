"""Exceptions raised by the management API client."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(Exception):
    """A failed management API call.

    ``status_code`` is ``None`` when the request never got a response
    (connection refused, timeout, ...). ``body`` holds the decoded error
    payload, or the raw text when the server did not answer with JSON.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"
