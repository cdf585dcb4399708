"""ServiceResult and ServiceError — the contract every layout operation returns.

INVARIANT: "Nothing to do" outcomes (no focused window, monitor out of
range) and rejected tokens are ``ok=False`` results, never exceptions.
The CLI, the MCP adapter, and tests all consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Service-level error codes. Token errors carry their own code (see
# ``awlctl.domain.resolve.GeometryError``).
NO_FOCUSED_WINDOW = "NO_FOCUSED_WINDOW"
MONITOR_OUT_OF_RANGE = "MONITOR_OUT_OF_RANGE"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for layout operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"move_in_work_area"``).
        data: Operation-specific payload (resolved plan, work area).
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build an ``ok=False`` result with a structured error."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
