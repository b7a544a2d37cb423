"""Read-only previews — password checks and username dry runs.

None of these touch a registry; the caller supplies the taken names.
"""

from __future__ import annotations

from collections.abc import Collection

from acctctl.domain.passwords import evaluate_password
from acctctl.domain.usernames import (
    canonicalize_username,
    normalize_username,
    suggest_alternatives,
)
from acctctl.services.result import ErrorCode, ServiceError, ServiceResult


def check_password(password: str) -> ServiceResult:
    """Evaluate *password*; a weak password is a failed result listing its problems."""
    check = evaluate_password(password)
    data = check.model_dump(mode="json")
    if check.strong:
        return ServiceResult(ok=True, op="check_password", data=data)
    return ServiceResult(
        ok=False,
        op="check_password",
        data=data,
        warnings=list(check.problems),
        error=ServiceError(
            code=ErrorCode.WEAK_PASSWORD,
            message="Password does not meet strength requirements",
            detail=data,
        ),
    )


def preview_username(raw: str, taken: Collection[str] = ()) -> ServiceResult:
    """Show the username *raw* would receive if *taken* were already assigned.

    ``collided`` means the base was already taken; ``suffixed`` means the
    result carries a numeral, which an empty base always does.
    """
    base = canonicalize_username(raw)
    username = normalize_username(raw, taken)
    return ServiceResult(
        ok=True,
        op="normalize",
        data={
            "raw_username": raw,
            "base": base,
            "username": username,
            "collided": bool(base) and base in taken,
            "suffixed": username != base,
        },
    )


def suggest_usernames(base: str, taken: Collection[str] = (), limit: int = 3) -> ServiceResult:
    """List up to *limit* free ``base + n`` alternatives."""
    return ServiceResult(
        ok=True,
        op="suggest",
        data={"base": base, "suggestions": suggest_alternatives(base, taken, limit)},
    )
