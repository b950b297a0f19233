"""Encode HHAS flag names back into a mask.

Usage:
    hhasflags encode public static --context prop
    hhasflags encode nullable soft --kind type
"""

import typer

from hhasflags.cli import (
    ContextOption,
    JsonOption,
    KindOption,
    error_exit,
    get_config,
    json_print,
    resolve_context,
    resolve_kind,
)
from hhasflags.decoder import (
    UnknownFlagError,
    context_label,
    string_to_attrs,
    string_to_fcall_flags,
    string_to_type_flags,
)

_EPILOG = """\
[bold]Examples:[/bold]

hhasflags encode public final -c func              0x42

hhasflags encode "public static" -c prop           Names may be quoted together

hhasflags encode Unpack Generics --kind fcall      0x3

[dim]Every name must exist for the chosen kind and context; an unknown
name is an error.[/dim]"""

app = typer.Typer(
    help="Encode HHAS flag names into a mask.",
    rich_markup_mode="rich",
    epilog=_EPILOG,
)


def encode_names(kind: str, names: list[str], context: int) -> int:
    """Return the mask for *names*; raises :class:`UnknownFlagError`."""
    tokens = " ".join(names)
    if kind == "type":
        return int(string_to_type_flags(tokens))
    if kind == "fcall":
        return int(string_to_fcall_flags(tokens))
    return int(string_to_attrs(context, tokens))


@app.callback(invoke_without_command=True)
def main(
    names: list[str] = typer.Argument(None, metavar="NAME...", help="Flag names"),
    context: list[str] | None = ContextOption,
    kind: str | None = KindOption,
    json_output: bool = JsonOption,
) -> None:
    """Print the mask, in hex, that the given flag names encode to."""
    cfg = get_config()
    kind_name = resolve_kind(kind, cfg, json_mode=json_output)
    ctx = resolve_context(context, cfg, json_mode=json_output)

    try:
        mask = encode_names(kind_name, names or [], ctx)
    except UnknownFlagError as e:
        error_exit(str(e), json_mode=json_output)

    if json_output:
        data = {"kind": kind_name, "mask": f"0x{mask:x}", "value": mask}
        if kind_name == "attr":
            data["context"] = context_label(ctx)
        json_print(data)
        return

    print(f"0x{mask:x}")


def main_entry() -> None:
    """Run the Typer CLI application."""
    app()


if __name__ == "__main__":
    main_entry()
