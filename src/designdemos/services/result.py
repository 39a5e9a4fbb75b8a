"""Result envelope shared by every service operation.

Services never raise for expected failures: they return a ``ServiceResult``
with ``ok=False`` and a coded ``ServiceError``.  Commands turn the envelope
into output and an exit status.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure reasons."""

    UNREPRESENTABLE_PAIRING = "UNREPRESENTABLE_PAIRING"
    INVALID_MODEL = "INVALID_MODEL"
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_STYLE = "UNKNOWN_STYLE"


class ServiceError(BaseModel):
    """Why an operation failed, with free-form context in ``detail``."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one demonstration operation.

    Attributes:
        ok: False when ``error`` explains why the operation could not run.
        op: Operation name used to pick a renderer (e.g. ``"gauge_render"``).
        data: Contract-validated payload; empty on failure.
        warnings: Notes about a successful run (e.g. ignored gauge values).
        error: Present only when ``ok`` is False.
        meta: Telemetry span tree under ``--verbose``, otherwise None.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def exit_code(self) -> int:
        """Process exit status for the CLI: 0 on success, 1 on failure."""
        return 0 if self.ok else 1
