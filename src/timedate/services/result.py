"""The envelope every TimeService operation returns.

Adapters (CLI, MCP) only ever see ServiceResult; domain exceptions are
translated into an ErrorCode plus a human message at the service boundary.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Stable machine-readable failure codes."""

    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    UNKNOWN_TIMEZONE = "UNKNOWN_TIMEZONE"
    INVALID_SOURCE_TIMEZONE = "INVALID_SOURCE_TIMEZONE"
    INVALID_TARGET_TIMEZONE = "INVALID_TARGET_TIMEZONE"
    TIME_OUT_OF_RANGE = "TIME_OUT_OF_RANGE"


class ServiceError(BaseModel):
    """Why an operation failed; ``detail`` carries the offending input."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one facade operation.

    Attributes:
        ok: True when ``data`` holds the operation's record.
        op: Operation name (``current_time``, ``time_at``, ``time_offset``,
            ``convert_timezone``, ``timezone_info``, ``time_format``,
            ``list_timezones``).
        data: The record as a plain dict; empty on failure.
        error: Set exactly when ``ok`` is False.
        meta: Telemetry and other out-of-band data (verbose mode only).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, record: BaseModel) -> ServiceResult:
        return cls(ok=True, op=op, data=record.model_dump())

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
        )
