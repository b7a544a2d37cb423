"""AccountRegistry — owns the username uniqueness invariant.

Pipeline per account: NORMALIZE → VALIDATE → RESERVE → RESPOND

INVARIANT: The whole pipeline runs under one lock, so normalization
always reads the same assigned set that reservation writes.
INVARIANT: A failed creation leaves the registry untouched.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import structlog

from acctctl.domain.account import DEFAULT_MASK_CHAR, Account
from acctctl.domain.passwords import MIN_PASSWORD_LENGTH, is_strong_password
from acctctl.domain.usernames import (
    conflict_base,
    normalize_username,
    suggest_alternatives,
)
from acctctl.services.result import AccountResult, ErrorCode, ServiceError, ServiceResult

logger = structlog.get_logger(__name__)


class AccountRegistry:
    """In-memory registry of accounts created during one session.

    Construct one per session (or per test) and pass it to call sites;
    registries share nothing with each other.

    Usage::

        registry = AccountRegistry()
        result = registry.create_account("Jastine ", "S3cur3Pa$$")
        if result.ok:
            print(result.account)
    """

    def __init__(
        self,
        *,
        max_suggestions: int = 3,
        mask_char: str = DEFAULT_MASK_CHAR,
    ) -> None:
        self._max_suggestions = max_suggestions
        self._mask_char = mask_char
        self._assigned: set[str] = set()
        self._accounts: list[Account] = []
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def assigned_usernames(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._assigned)

    @property
    def accounts(self) -> tuple[Account, ...]:
        with self._lock:
            return tuple(self._accounts)

    def get_account(self, normalized_username: str) -> Account | None:
        """Look up an account by its canonical username."""
        with self._lock:
            for account in self._accounts:
                if account.normalized_username == normalized_username:
                    return account
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, username: object) -> bool:
        with self._lock:
            return username in self._assigned

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create_account(self, raw_username: str, password: str) -> AccountResult:
        """Normalize *raw_username*, validate *password*, and reserve the name.

        Returns a failed result with code ``WEAK_PASSWORD`` when the password
        is rejected. Username collisions never fail; they get a numeric suffix.
        """
        op = "create_account"
        with self._lock:
            # ── NORMALIZE ─────────────────────────────────────────
            normalized = normalize_username(raw_username, self._assigned)

            # ── VALIDATE ──────────────────────────────────────────
            if not is_strong_password(password):
                return self._weak_password(op, raw_username)

            # ── RESERVE ───────────────────────────────────────────
            account = Account(normalized_username=normalized, password=password)
            self._assigned.add(normalized)
            self._accounts.append(account)

        logger.debug(
            "account.created",
            raw_username=raw_username,
            username=normalized,
        )

        # ── RESPOND ───────────────────────────────────────────────
        return AccountResult(
            ok=True,
            op=op,
            account=account,
            data={
                "raw_username": raw_username,
                "username": account.normalized_username,
                "password": account.masked_password(self._mask_char),
                "summary": account.render(self._mask_char),
            },
        )

    def create_many(self, items: Iterable[Mapping[str, Any]]) -> ServiceResult:
        """Create accounts from ``{"username", "password"}`` mappings.

        Every item is attempted; failures are collected rather than
        stopping the batch.
        """
        created: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []
        warnings: list[str] = []
        total = 0

        for index, item in enumerate(items):
            total += 1
            username = item.get("username")
            password = item.get("password")
            if not isinstance(username, str) or not isinstance(password, str):
                errors.append(
                    {
                        "index": index,
                        "code": ErrorCode.INVALID_ITEM,
                        "error": "item needs string 'username' and 'password'",
                    }
                )
                continue

            result = self.create_account(username, password)
            warnings.extend(result.warnings)
            if result.ok:
                created.append({"index": index, **result.data})
            else:
                assert result.error is not None
                errors.append(
                    {
                        "index": index,
                        "code": result.error.code,
                        "error": result.error.message,
                    }
                )

        if not errors:
            return ServiceResult(
                ok=True,
                op="create_batch",
                data={"created": created, "errors": errors},
                warnings=warnings,
            )
        return ServiceResult(
            ok=False,
            op="create_batch",
            data={"created": created, "errors": errors},
            warnings=warnings,
            error=ServiceError(
                code=ErrorCode.BATCH_PARTIAL,
                message=f"{len(errors)} of {total} items failed",
            ),
        )

    # ------------------------------------------------------------------
    # Failure path (called with the lock held)
    # ------------------------------------------------------------------

    def _weak_password(self, op: str, raw_username: str) -> AccountResult:
        warnings = [
            f"Weak password for '{raw_username}'. Password must be at least "
            f"{MIN_PASSWORD_LENGTH} characters with multiple character types."
        ]
        logger.warning("account.weak_password", raw_username=raw_username)
        detail: dict[str, Any] = {"raw_username": raw_username}

        # Matches the raw lowercase name only, not the normalized form.
        if raw_username.lower() in self._assigned:
            suggestions = suggest_alternatives(
                conflict_base(raw_username),
                self._assigned,
                self._max_suggestions,
            )
            detail["suggestions"] = suggestions
            warnings.append(
                f"Username conflict for '{raw_username}'. "
                f"Suggestions: {', '.join(suggestions)}"
            )
            logger.warning(
                "account.username_conflict",
                raw_username=raw_username,
                suggestions=suggestions,
            )

        return AccountResult(
            ok=False,
            op=op,
            data={"raw_username": raw_username},
            warnings=warnings,
            error=ServiceError(
                code=ErrorCode.WEAK_PASSWORD,
                message="Password does not meet strength requirements",
                detail=detail,
            ),
        )
