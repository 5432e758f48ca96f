"""ServiceResult and ServiceError — the service return contract.

INVARIANT: Service methods return ServiceResult instead of raising for
expected configuration failures.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"load_name_rules"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a rule section that was rejected.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (per-rule failures, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
