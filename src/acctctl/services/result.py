"""ServiceResult and ServiceError — the outcome contract for acctctl.

INVARIANT: Expected failures (a weak password, a bad batch item) are
returned as ``ServiceResult(ok=False, ...)``, never raised.
The CLI renderers consume this type.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from acctctl.domain.account import Account


class ErrorCode(StrEnum):
    """Error codes carried by ServiceError.code."""

    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_ITEM = "INVALID_ITEM"
    INVALID_BATCH = "INVALID_BATCH"
    BATCH_PARTIAL = "BATCH_PARTIAL"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_account"``).
        data: Operation-specific payload, JSON-safe.
        warnings: Advisories raised along the way (non-fatal).
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None


class AccountResult(ServiceResult):
    """Outcome of a single account creation.

    ``account`` is set exactly when ``ok`` is True. It is excluded from
    serialization; ``data`` carries the masked, display-safe view.
    """

    account: Account | None = Field(default=None, exclude=True)

    @property
    def raw_username(self) -> str | None:
        """Username as the caller typed it (available on both outcomes)."""
        return self.data.get("raw_username")
