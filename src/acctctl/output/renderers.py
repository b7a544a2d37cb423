"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO; callers get
the text back from :func:`render_result`.

Renderers are dispatched by ``result.op``. Unknown ops fall through to
a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from acctctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from acctctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    A batch lists every created username, even when some items failed.
    """
    if result.op == "create_batch":
        lines = [str(item.get("username", "")) for item in result.data.get("created", [])]
        if not result.ok:
            lines.insert(0, _quiet_error(result))
        return "\n".join(lines) or f"OK: {result.op}"
    if not result.ok:
        return _quiet_error(result)
    if result.op in ("create_account", "normalize"):
        return str(result.data.get("username", ""))
    if result.op == "suggest":
        return "\n".join(result.data.get("suggestions", []))
    return f"OK: {result.op}"


def _quiet_error(result: ServiceResult) -> str:
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {msg}"


# ── Helpers ───────────────────────────────────────────────────────────
#
# User-supplied text is always wrapped in Text so square brackets in a
# username are printed literally instead of parsed as Rich markup.


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "acct.ok"), (f"  {result.op}", "acct.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = {"username": "acct.username", "password": "acct.masked"}.get(key, "")
    console.print(Text.assemble((f"  {key}: ", "acct.key"), (str(value), style)))


def _warning_lines(console: Console, warnings: list[str]) -> None:
    for warning in warnings:
        console.print(Text.assemble(("  warning: ", "acct.warning"), warning))


def _created_table(console: Console, created: list[dict[str, Any]]) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Requested")
    table.add_column("Username", style="acct.username", no_wrap=True)
    table.add_column("Password", style="acct.masked")
    for item in created:
        table.add_row(
            Text(str(item.get("index", ""))),
            Text(str(item.get("raw_username", ""))),
            Text(str(item.get("username", ""))),
            Text(str(item.get("password", ""))),
        )
    console.print(table)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "acct.error"), (f"  {result.op}", "acct.op"), " — ", msg)
    )

    _warning_lines(console, result.warnings)

    for item in result.data.get("errors", []):
        console.print(
            Text.assemble(
                ("  error", "acct.error"),
                f" index={item.get('index')}: {item.get('error')}",
            )
        )

    created = result.data.get("created", [])
    if created:
        _field(console, "created", len(created))
        _created_table(console, created)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Account renderers ─────────────────────────────────────────────────


def _render_account(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    console.print(Text(f"  {result.data.get('summary', '')}"))
    if verbose:
        for key in ("raw_username", "username", "password"):
            if key in result.data:
                _field(console, key, result.data[key])


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    created = result.data.get("created", [])
    _field(console, "created", len(created))
    _field(console, "errors", len(result.data.get("errors", [])))
    if created:
        _created_table(console, created)


def _render_password_check(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    console.print(Text("  strong", style="acct.strong"))
    _field(console, "length", result.data.get("length", 0))
    _field(console, "classes", ", ".join(result.data.get("classes", [])))


# ── Username renderers ────────────────────────────────────────────────


def _render_normalize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "username", result.data.get("username", ""))
    if verbose or result.data.get("suffixed"):
        _field(console, "base", result.data.get("base", ""))


def _render_suggest(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    suggestions = result.data.get("suggestions", [])
    if not suggestions:
        console.print("  (no suggestions)")
    for name in suggestions:
        console.print(Text(f"  {name}", style="acct.username"))


# ── Demo renderer ─────────────────────────────────────────────────────


def _render_demo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for step in result.data.get("steps", []):
        console.print(Text(str(step.get("label", "")), style="bold"))
        if step.get("ok"):
            console.print(Text(f"  {step.get('summary', '')}"))
        else:
            console.print(
                Text.assemble(("  failed", "acct.error"), f" {step.get('error', '')}")
            )
        _warning_lines(console, step.get("warnings", []))
    console.print(f"\n{result.data.get('count', 0)} accounts created")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "create_account": _render_account,
    "create_batch": _render_batch,
    "check_password": _render_password_check,
    "normalize": _render_normalize,
    "suggest": _render_suggest,
    "demo": _render_demo,
}
