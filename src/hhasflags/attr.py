"""attr.py – Attribute bit layout and declaration contexts.

Attribute bits are shared between declaration kinds: the same bit can mean
one thing on a class and something else on a property.  Members that reuse
a bit are enum aliases of the first member with that value, so decode by
table (see :mod:`hhasflags.flag_data`), never by ``Attr(value).name``.

Column legend for the comments below::

    C = class   F = func   P = prop   T = trait import
    A = alias   R = parameter   K = constant
"""

from enum import IntFlag


class AttrContext(IntFlag):
    """Where an attribute bitmask appears.  One bit per declaration kind."""

    CLASS = 0x1
    FUNC = 0x2
    PROP = 0x4
    TRAIT_IMPORT = 0x8
    ALIAS = 0x10
    PARAMETER = 0x20
    CONSTANT = 0x40


ALL_CONTEXTS = (
    AttrContext.CLASS
    | AttrContext.FUNC
    | AttrContext.PROP
    | AttrContext.TRAIT_IMPORT
    | AttrContext.ALIAS
    | AttrContext.PARAMETER
    | AttrContext.CONSTANT
)


class Attr(IntFlag):
    NONE = 0

    FORBID_DYNAMIC_PROPS = 1 << 0  # C
    DEEP_INIT = 1 << 0  # P

    PUBLIC = 1 << 1  # F P T K
    PROTECTED = 1 << 2  # F P T K
    PRIVATE = 1 << 3  # F P T K

    STATIC = 1 << 4  # F P T
    ENUM = 1 << 4  # C

    ABSTRACT = 1 << 5  # C F T K
    FINAL = 1 << 6  # C F T

    INTERFACE = 1 << 7  # C
    SYSTEM_INITIAL_VALUE = 1 << 7  # P

    TRAIT = 1 << 8  # C F P

    SUPPORTS_ASYNC_EAGER_RETURN = 1 << 9  # F
    NO_IMPLICIT_NULLABLE = 1 << 9  # P

    NO_INJECTION = 1 << 10  # F
    INITIAL_SATISFIES_TC = 1 << 10  # P

    SEALED = 1 << 11  # C
    INTERCEPTABLE = 1 << 11  # F
    LATE_INIT = 1 << 11  # P

    NO_EXPAND_TRAIT = 1 << 12  # C
    NO_BAD_REDECLARE = 1 << 12  # P

    NO_OVERRIDE = 1 << 13  # C F

    IS_READONLY = 1 << 14  # P R
    READONLY_THIS = 1 << 14  # F

    READONLY_RETURN = 1 << 15  # F
    INTERNAL = 1 << 16  # C F P K
    IS_CONST = 1 << 17  # C P
    ENUM_CLASS = 1 << 18  # C
    BUILTIN = 1 << 19  # C F
    IS_CLOSURE_CLASS = 1 << 20  # C
    HAS_CLOSURE_COEFFECTS_PROP = 1 << 21  # C
    PERSISTENT = 1 << 22  # C F A
    DYNAMICALLY_CALLABLE = 1 << 23  # F
    DYNAMICALLY_CONSTRUCTIBLE = 1 << 24  # C
    IS_FOLDABLE = 1 << 25  # F
    NO_FCALL_BUILTIN = 1 << 26  # F
    VARIADIC_PARAM = 1 << 27  # F
    PROVENANCE_SKIP_FRAME = 1 << 28  # F
    IS_METH_CALLER = 1 << 29  # F

    # Reserved so masks can be range-checked; never named.
    UNUSED_MAX = 1 << 31
