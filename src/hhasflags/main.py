"""main.py – Umbrella CLI entry point for hhasflags.

Lazily imports and registers the subcommand typer apps so that a broken
or missing optional dependency in one command doesn't prevent the rest of
the CLI from loading.

Each module exposes a single ``main`` callback, registered as a flat
``app.command()`` entry.
"""

import importlib
import sys
from collections.abc import Callable

import typer

app = typer.Typer(
    help="Decode and encode HHAS attribute, type-constraint and FCall flags.",
    rich_markup_mode="rich",
    no_args_is_help=True,
    epilog="""\
[bold]Typical use:[/bold]
  hhasflags decode 0x42 -c func       Names for an attribute mask
  hhasflags encode public static -c prop
  hhasflags table -c class            Which names a class may carry

[dim]Defaults for --context and --kind are read from hhasflags.toml
when one is found in the current directory or a parent.[/dim]""",
)

# ---------------------------------------------------------------------------
# Subcommand registry
# ---------------------------------------------------------------------------

_COMMANDS: list[tuple[str, str, str]] = [
    ("decode", "hhasflags.decode", "Decode a flag mask into HHAS flag names."),
    ("encode", "hhasflags.encode", "Encode HHAS flag names into a mask."),
    ("table", "hhasflags.table", "List flag names and bits, in output order."),
]


def _make_stub_cmd(mod_name: str, err: ImportError) -> Callable[[], None]:
    """Create a stub command function that reports a missing dependency."""

    def _stub() -> None:
        print(f"Error: could not load '{mod_name}': {err}", file=sys.stderr)
        raise typer.Exit(code=1)

    return _stub


for _name, _module, _help in _COMMANDS:
    try:
        _mod = importlib.import_module(_module)
        _epilog = getattr(_mod.app.info, "epilog", None)
        if not isinstance(_epilog, str):
            _epilog = None
        app.command(name=_name, help=_help, epilog=_epilog)(_mod.main)
    except ImportError as _exc:
        app.command(name=_name, help=f"[unavailable] {_help}")(_make_stub_cmd(_module, _exc))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
