"""Show the flag name tables.

Usage:
    hhasflags table --context prop
    hhasflags table --kind fcall --json
"""

import typer
from rich.console import Console
from rich.table import Table

from hhasflags.attr import ALL_CONTEXTS
from hhasflags.cli import (
    ContextOption,
    JsonOption,
    KindOption,
    get_config,
    json_print,
    resolve_context,
    resolve_kind,
)
from hhasflags.decoder import context_label, legal_attrs
from hhasflags.flag_data import FCALL_FLAG_TABLE, TYPE_FLAG_TABLE

app = typer.Typer(
    help="List flag names and bits, in output order.",
    rich_markup_mode="rich",
)


def table_rows(kind: str, context: int) -> list[dict[str, str]]:
    """Return one ``{"name", "bit", "contexts"}`` dict per row, in output order."""
    if kind == "type":
        return [{"name": e.name, "bit": f"0x{int(e.bit):x}", "contexts": ""} for e in TYPE_FLAG_TABLE]
    if kind == "fcall":
        return [{"name": e.name, "bit": f"0x{int(e.bit):x}", "contexts": ""} for e in FCALL_FLAG_TABLE]
    return [
        {"name": e.name, "bit": f"0x{int(e.bit):x}", "contexts": context_label(e.contexts)}
        for e in legal_attrs(context)
    ]


@app.callback(invoke_without_command=True)
def main(
    context: list[str] | None = ContextOption,
    kind: str | None = KindOption,
    json_output: bool = JsonOption,
) -> None:
    """Print the names of a flag space, optionally restricted to a context.

    Without ``--context`` the attribute table is shown for every context.
    """
    cfg = get_config()
    kind_name = resolve_kind(kind, cfg, json_mode=json_output)
    ctx = resolve_context(context, cfg, json_mode=json_output) if context else ALL_CONTEXTS

    rows = table_rows(kind_name, ctx)

    if json_output:
        json_print(rows)
        return

    console = Console()
    tbl = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    tbl.add_column("Name", style="cyan")
    tbl.add_column("Bit", justify="right")
    if kind_name == "attr":
        tbl.add_column("Contexts", style="dim")
    for row in rows:
        if kind_name == "attr":
            tbl.add_row(row["name"], row["bit"], row["contexts"])
        else:
            tbl.add_row(row["name"], row["bit"])
    console.print(tbl)


def main_entry() -> None:
    """Run the Typer CLI application."""
    app()


if __name__ == "__main__":
    main_entry()
