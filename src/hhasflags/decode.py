"""Decode a flag mask into the names HHAS would print for it.

Usage:
    hhasflags decode 0x42 --context func
    hhasflags decode 0x11 --kind type
"""

import typer

from hhasflags.cli import (
    ContextOption,
    JsonOption,
    KindOption,
    get_config,
    json_print,
    parse_mask,
    resolve_context,
    resolve_kind,
    warn,
)
from hhasflags.decoder import (
    attrs_to_vec,
    context_label,
    fcall_flags_to_string,
    string_to_attrs,
    string_to_fcall_flags,
    string_to_type_flags,
    type_flags_to_string,
)

_EPILOG = """\
[bold]Examples:[/bold]

hhasflags decode 0x42 -c func               public final

hhasflags decode 0x1 -c class -c prop       deep_init no_dynamic_props

hhasflags decode 0x11 --kind type           nullable soft

hhasflags decode 0x3 --kind fcall --json    Machine-readable JSON output

[dim]Bits that have no name in the chosen context are left out.  With
warn_unnamed = true in hhasflags.toml they are reported on stderr.[/dim]"""

app = typer.Typer(
    help="Decode a flag mask into HHAS flag names.",
    rich_markup_mode="rich",
    epilog=_EPILOG,
)


def decode_mask(kind: str, mask: int, context: int) -> tuple[list[str], int]:
    """Return ``(names, unnamed_bits)`` for *mask*.

    *unnamed_bits* is whatever part of *mask* does not survive a round
    trip through the names.
    """
    if kind == "type":
        text = type_flags_to_string(mask)
        names = text.split()
        named = int(string_to_type_flags(names))
    elif kind == "fcall":
        text = fcall_flags_to_string(mask)
        names = text.split()
        named = int(string_to_fcall_flags(names))
    else:
        names = attrs_to_vec(context, mask)
        named = int(string_to_attrs(context, names))
    return names, mask & ~named


@app.callback(invoke_without_command=True)
def main(
    mask_text: str = typer.Argument(..., metavar="MASK", help="Flag mask (decimal or 0x hex)"),
    context: list[str] | None = ContextOption,
    kind: str | None = KindOption,
    json_output: bool = JsonOption,
) -> None:
    """Print the space-separated flag names for MASK.

    Attribute masks are decoded for ``--context`` (default from
    ``hhasflags.toml``, else ``func``).  Type and fcall masks ignore it.
    """
    cfg = get_config()
    kind_name = resolve_kind(kind, cfg, json_mode=json_output)
    mask = parse_mask(mask_text, json_mode=json_output)
    ctx = resolve_context(context, cfg, json_mode=json_output)

    names, unnamed = decode_mask(kind_name, mask, ctx)

    if json_output:
        data = {
            "kind": kind_name,
            "mask": f"0x{mask:x}",
            "names": names,
            "text": " ".join(names),
            "unnamed": f"0x{unnamed:x}",
        }
        if kind_name == "attr":
            data["context"] = context_label(ctx)
        json_print(data)
        return

    print(" ".join(names))
    if unnamed and cfg.warn_unnamed:
        where = f" for context {context_label(ctx)}" if kind_name == "attr" else ""
        warn(f"bits 0x{unnamed:x} have no {kind_name} name{where}")


def main_entry() -> None:
    """Run the Typer CLI application."""
    app()


if __name__ == "__main__":
    main_entry()
