"""decoder.py – Convert flag bitmasks to HHAS names and back.

Decoding is best-effort and total: bits that are unknown, or not legal in
the requested context, are left out of the output rather than reported.
Callers that need to notice unrendered bits compare the input mask with
the re-encoded output themselves.

Encoding (names back to bits) is strict, because a typo in hand-written
assembly must not silently drop an attribute.
"""

from __future__ import annotations

from collections.abc import Iterable

from hhasflags.attr import Attr, AttrContext
from hhasflags.flag_data import ATTR_TABLE, FCALL_FLAG_TABLE, TYPE_FLAG_TABLE, AttrEntry, FlagEntry
from hhasflags.flags import FCallArgsFlags, TypeConstraintFlags


class UnknownFlagError(ValueError):
    """A flag name has no bit in the table (or context) it was looked up in."""

    def __init__(self, name: str, context: int | None = None) -> None:
        self.name = name
        self.context = context
        if context is None:
            msg = f"unknown flag {name!r}"
        else:
            msg = f"unknown attribute {name!r} for context {context_label(context)}"
        super().__init__(msg)


def context_label(context: int) -> str:
    """Return ``"class|prop"``-style text for a (possibly combined) context."""
    names = [c.name.lower() for c in AttrContext if c & context]
    return "|".join(names) if names else f"0x{int(context):x}"


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def attrs_to_vec(context: int, attr: int) -> list[str]:
    """Return the names of the bits of *attr* that are legal in *context*.

    Names come out in table order.  Set bits that are unknown or not legal
    in *context* are skipped.
    """
    return [e.name for e in ATTR_TABLE if e.bit & attr and e.legal_in(context)]


def attrs_to_string(context: int, attr: int) -> str:
    """Space-separated form of :func:`attrs_to_vec`, as written in HHAS."""
    return " ".join(attrs_to_vec(context, attr))


def _flags_to_string(table: tuple[FlagEntry, ...], flags: int) -> str:
    return " ".join(e.name for e in table if e.bit & flags)


def type_flags_to_string(flags: int) -> str:
    """Render type-constraint flags, e.g. ``"nullable soft"``."""
    return _flags_to_string(TYPE_FLAG_TABLE, flags)


def fcall_flags_to_string(flags: int) -> str:
    """Render FCall argument flags, e.g. ``"Unpack Generics"``."""
    return _flags_to_string(FCALL_FLAG_TABLE, flags)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def legal_attrs(context: int) -> list[AttrEntry]:
    """Return the attribute table rows legal in *context*, in table order."""
    return [e for e in ATTR_TABLE if e.legal_in(context)]


def _tokens(names: str | Iterable[str]) -> list[str]:
    if isinstance(names, str):
        return names.split()
    return [n for n in names if n]


def string_to_attrs(context: int, names: str | Iterable[str]) -> Attr:
    """Parse whitespace-separated attribute names into a mask.

    Raises:
        UnknownFlagError: a name is not defined for *context*.
    """
    by_name = {e.name: e.bit for e in legal_attrs(context)}
    mask = 0
    for name in _tokens(names):
        if name not in by_name:
            raise UnknownFlagError(name, context)
        mask |= by_name[name]
    return Attr(mask)


def _string_to_flags(table: tuple[FlagEntry, ...], names: str | Iterable[str]) -> int:
    by_name = {e.name: e.bit for e in table}
    mask = 0
    for name in _tokens(names):
        if name not in by_name:
            raise UnknownFlagError(name)
        mask |= by_name[name]
    return mask


def string_to_type_flags(names: str | Iterable[str]) -> TypeConstraintFlags:
    """Inverse of :func:`type_flags_to_string`."""
    return TypeConstraintFlags(_string_to_flags(TYPE_FLAG_TABLE, names))


def string_to_fcall_flags(names: str | Iterable[str]) -> FCallArgsFlags:
    """Inverse of :func:`fcall_flags_to_string`."""
    return FCallArgsFlags(_string_to_flags(FCALL_FLAG_TABLE, names))
