"""Project configuration loader for hhasflags.

Reads ``hhasflags.toml`` from the project root, if there is one, and
exposes the ``[decode]`` settings used as command-line defaults.  Without
a config file every command runs with the built-in defaults.

Example ``hhasflags.toml``::

    [decode]
    context = "class|prop"   # default for --context
    kind = "attr"            # attr, type or fcall
    warn_unnamed = true      # report bits the decoder has no name for

Usage::

    from hhasflags.config import load_config
    cfg = load_config()
    cfg.context        # AttrContext.CLASS | AttrContext.PROP
"""

from __future__ import annotations

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from hhasflags.attr import ALL_CONTEXTS, AttrContext

CONFIG_NAME = "hhasflags.toml"

KINDS = ("attr", "type", "fcall")

_DECODE_KEYS = {"context", "kind", "warn_unnamed"}


def parse_context(text: str) -> AttrContext:
    """Parse ``"func"``, ``"class|prop"`` or ``"class,prop"`` into a context.

    Names are case-insensitive; ``-`` and ``_`` are interchangeable, so
    ``trait-import`` works too.  ``all`` selects every context.
    """
    mask = AttrContext(0)
    parts = [p.strip() for p in text.replace(",", "|").split("|")]
    for part in parts:
        if not part:
            continue
        key = part.upper().replace("-", "_")
        if key == "ALL":
            mask |= ALL_CONTEXTS
            continue
        try:
            mask |= AttrContext[key]
        except KeyError:
            valid = ", ".join(c.name.lower() for c in AttrContext)
            raise ValueError(f"Unknown context {part!r} (expected one of: {valid}, all)") from None
    if not mask:
        raise ValueError(f"Empty context: {text!r}")
    return mask


@dataclass
class ProjectConfig:
    """Parsed ``hhasflags.toml``."""

    # Directory the config file was found in, or None when using defaults
    root: Path | None = None

    # --- [decode] ---
    context: AttrContext = field(default_factory=lambda: AttrContext.FUNC)
    kind: str = "attr"
    warn_unnamed: bool = True


def _find_root(start: Path | None = None) -> Path | None:
    """Walk up from *start* (or cwd) looking for ``hhasflags.toml``."""
    candidate = (start or Path.cwd()).resolve()
    while True:
        if (candidate / CONFIG_NAME).exists():
            return candidate
        if candidate == candidate.parent:
            return None
        candidate = candidate.parent


def load_config(root: Path | None = None) -> ProjectConfig:
    """Load ``hhasflags.toml``.

    Args:
        root: Directory to start the search from.  Defaults to the cwd.

    Returns defaults when no config file is found.

    Raises:
        ValueError: a setting has an invalid value.
    """
    found = _find_root(root)
    if found is None:
        return ProjectConfig()

    with open(found / CONFIG_NAME, "rb") as f:
        raw = tomllib.load(f)

    decode = raw.get("decode", {})
    if not isinstance(decode, dict):
        raise ValueError(f"[decode] must be a table, got {decode!r}")

    unknown = sorted(set(decode) - _DECODE_KEYS)
    if unknown:
        warnings.warn(f"Ignoring unknown [decode] keys in {CONFIG_NAME}: {unknown}", stacklevel=2)

    kind = decode.get("kind", "attr")
    if isinstance(kind, str):
        kind = kind.lower()
    if kind not in KINDS:
        raise ValueError(f"[decode] kind must be one of {list(KINDS)}, got {kind!r}")

    warn_unnamed = decode.get("warn_unnamed", True)
    if not isinstance(warn_unnamed, bool):
        raise ValueError(f"[decode] warn_unnamed must be a boolean, got {warn_unnamed!r}")

    context = decode.get("context", "func")
    if not isinstance(context, str):
        raise ValueError(f"[decode] context must be a string, got {context!r}")

    return ProjectConfig(
        root=found,
        context=parse_context(context),
        kind=kind,
        warn_unnamed=warn_unnamed,
    )
