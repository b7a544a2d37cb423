"""Sample provisioning session.

Creates a handful of accounts against one registry: two clean sign-ups,
a retry of an existing name, a weak password, and a look-alike name.
"""

from __future__ import annotations

from typing import Any

from acctctl.services.registry import AccountRegistry
from acctctl.services.result import ServiceResult

DEMO_STEPS: tuple[tuple[str, str, str], ...] = (
    ("Creating first accounts:", "Jastine ", "S3cur3Pa$$"),
    ("Creating first accounts:", "Nicole", "J@ne1234"),
    ("Attempting duplicate username:", "jastine", "An0therPa$$"),
    ("Attempting weak password:", "mochi", "weak"),
    ("Creating account with similar name:", "JastineNicole", "V3ryS3cure!"),
)


def run_demo(registry: AccountRegistry) -> ServiceResult:
    """Run every DEMO_STEPS entry through *registry* and collect the outcomes."""
    steps: list[dict[str, Any]] = []
    for label, raw_username, password in DEMO_STEPS:
        result = registry.create_account(raw_username, password)
        step: dict[str, Any] = {
            "label": label,
            "raw_username": raw_username,
            "ok": result.ok,
            "warnings": list(result.warnings),
        }
        if result.ok:
            step["username"] = result.data["username"]
            step["summary"] = result.data["summary"]
        else:
            step["error"] = result.error.message if result.error else ""
        steps.append(step)

    return ServiceResult(
        ok=True,
        op="demo",
        data={"steps": steps, "count": len(registry)},
    )
