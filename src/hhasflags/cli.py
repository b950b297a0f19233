"""Shared CLI utilities for hhasflags commands.

Provides the common Typer options, config-loading helpers, and standardised
output / error helpers so that every command handles ``--context``,
``--kind``, mask parsing, and JSON output the same way.

Usage in a command::

    import typer
    from hhasflags.cli import ContextOption, error_exit, get_config, resolve_context

    app = typer.Typer()

    @app.command()
    def main(context: list[str] | None = ContextOption) -> None:
        cfg = get_config()
        ctx = resolve_context(context, cfg)
        ...
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from hhasflags.attr import AttrContext
from hhasflags.config import KINDS, ProjectConfig, load_config, parse_context

# Re-usable Typer options
ContextOption: list[str] | None = typer.Option(
    None,
    "--context",
    "-c",
    help="Declaration context: class, func, prop, trait-import, alias, parameter, "
    "constant or all.  Repeat or join with '|' to combine.",
)

KindOption: str | None = typer.Option(
    None,
    "--kind",
    "-k",
    help="Flag space: attr (default), type or fcall.",
)

JsonOption: bool = typer.Option(False, "--json", help="Output results as JSON")


def get_config() -> ProjectConfig:
    """Load ``hhasflags.toml``, exiting with an error if it is invalid."""
    try:
        return load_config()
    except (OSError, ValueError) as e:
        error_exit(f"Bad config: {e}")


# ---------------------------------------------------------------------------
# Standardised output helpers
# ---------------------------------------------------------------------------

_err_console = Console(stderr=True)


def error_exit(msg: str, *, json_mode: bool = False, code: int = 1) -> NoReturn:
    """Print *msg* as an error and ``raise typer.Exit(code)``."""
    if json_mode:
        print(json.dumps({"error": msg}, indent=2))
    else:
        _err_console.print(f"[red bold]error:[/red bold] {escape(msg)}")
    raise typer.Exit(code=code)


def warn(msg: str) -> None:
    """Print a non-fatal diagnostic to stderr."""
    _err_console.print(f"[yellow bold]warning:[/yellow bold] {escape(msg)}")


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def parse_mask(text: str, *, json_mode: bool = False) -> int:
    """Parse a flag mask, exiting on invalid input.

    Accepts decimal and ``0x``/``0o``/``0b``-prefixed literals, with
    optional ``_`` digit separators.  Negative masks are rejected.
    """
    try:
        value = int(text.strip(), 0)
    except ValueError:
        error_exit(f"Invalid mask: {text!r}", json_mode=json_mode)
    if value < 0:
        error_exit(f"Mask must not be negative: {text!r}", json_mode=json_mode)
    return value


def resolve_context(
    values: list[str] | None, cfg: ProjectConfig, *, json_mode: bool = False
) -> AttrContext:
    """Combine repeated ``--context`` values, falling back to the config."""
    if not values:
        return cfg.context
    try:
        return parse_context("|".join(values))
    except ValueError as e:
        error_exit(str(e), json_mode=json_mode)


def resolve_kind(value: str | None, cfg: ProjectConfig, *, json_mode: bool = False) -> str:
    """Validate ``--kind``, falling back to the config."""
    kind = (value or cfg.kind).lower()
    if kind not in KINDS:
        error_exit(f"Unknown kind {kind!r} (expected one of: {', '.join(KINDS)})", json_mode=json_mode)
    return kind
