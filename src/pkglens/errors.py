"""Error taxonomy shared by every registry adapter.

Adapters either return a result or raise a ``PkgLensError`` subclass.
Library exceptions (``httpx.HTTPError``, ``pydantic.ValidationError``) are
translated at the boundary where they occur and never escape an adapter.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    FETCH_FAILED = "FETCH_FAILED"
    PARSE_FAILED = "PARSE_FAILED"
    INVALID_INPUT = "INVALID_INPUT"


class PkgLensError(Exception):
    """Base error carrying a machine-readable code and a recoverability hint."""

    code: ErrorCode
    recoverable: bool = False

    def __init__(self, message: str, *, recoverable: bool | None = None) -> None:
        super().__init__(message)
        self.message = message
        if recoverable is not None:
            self.recoverable = recoverable

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }


class FetchError(PkgLensError):
    """Upstream responded with a non-success status or the transport failed."""

    code = ErrorCode.FETCH_FAILED
    recoverable = True

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        recoverable: bool | None = None,
    ) -> None:
        super().__init__(message, recoverable=recoverable)
        self.url = url
        self.status_code = status_code


class ParseError(PkgLensError):
    """Upstream body could not be decoded into the expected shape."""

    code = ErrorCode.PARSE_FAILED


class InvalidInputError(PkgLensError):
    """A package name does not have the identifier shape the backend requires."""

    code = ErrorCode.INVALID_INPUT
