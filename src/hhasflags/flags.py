"""Type-constraint and call-site flag layouts.

Neither space depends on :class:`~hhasflags.attr.AttrContext`.
"""

from enum import IntFlag


class TypeConstraintFlags(IntFlag):
    """Flags carried by a parameter or return type constraint."""

    NO_FLAGS = 0
    NULLABLE = 0x1
    EXTENDED_HINT = 0x4
    TYPE_VAR = 0x8
    SOFT = 0x10
    TYPE_CONSTANT = 0x20
    RESOLVED = 0x40
    DISPLAY_NULLABLE = 0x100
    UPPER_BOUND = 0x200


class FCallArgsFlags(IntFlag):
    """Flags packed into the low bits of an FCall argument descriptor.

    Bits from ``NUM_ARGS_START`` upward hold the argument count.
    """

    NONE = 0
    HAS_UNPACK = 1 << 0
    HAS_GENERICS = 1 << 1
    LOCK_WHILE_UNWINDING = 1 << 2
    SKIP_REPACK = 1 << 3
    SKIP_COEFFECTS_CHECK = 1 << 4
    ENFORCE_MUTABLE_RETURN = 1 << 5
    ENFORCE_READONLY_THIS = 1 << 6
    EXPLICIT_CONTEXT = 1 << 7
    HAS_IN_OUT = 1 << 8
    ENFORCE_IN_OUT = 1 << 9
    ENFORCE_READONLY = 1 << 10
    HAS_ASYNC_EAGER_OFFSET = 1 << 11
    NUM_ARGS_START = 1 << 12
