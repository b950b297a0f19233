"""Flag name tables for the HHAS (dis)assembler.

Row order is the order names are printed in, and the order the assembler's
parser was written against.  It is deliberately not bit order: append new
rows at the end of the group they belong to and never re-sort.

Tables are built once at import and never mutated.
"""

from dataclasses import dataclass

from hhasflags.attr import Attr
from hhasflags.attr import AttrContext as Ctx
from hhasflags.flags import FCallArgsFlags, TypeConstraintFlags

C = Ctx.CLASS
F = Ctx.FUNC
P = Ctx.PROP
T = Ctx.TRAIT_IMPORT
A = Ctx.ALIAS
R = Ctx.PARAMETER
K = Ctx.CONSTANT


@dataclass(frozen=True)
class AttrEntry:
    """One named attribute bit and the contexts it is meaningful in."""

    bit: int
    contexts: int
    name: str

    def legal_in(self, context: int) -> bool:
        return bool(self.contexts & context)


@dataclass(frozen=True)
class FlagEntry:
    """One named bit of a context-free flag space."""

    bit: int
    name: str


ATTR_TABLE: tuple[AttrEntry, ...] = (
    # visibility and storage
    AttrEntry(Attr.PUBLIC, F | P | T | K, "public"),
    AttrEntry(Attr.PROTECTED, F | P | T | K, "protected"),
    AttrEntry(Attr.PRIVATE, F | P | T | K, "private"),
    AttrEntry(Attr.STATIC, F | P | T, "static"),
    AttrEntry(Attr.ENUM, C, "enum"),
    AttrEntry(Attr.DEEP_INIT, P, "deep_init"),
    AttrEntry(Attr.FORBID_DYNAMIC_PROPS, C, "no_dynamic_props"),
    # class shape and inheritance
    AttrEntry(Attr.INTERFACE, C, "interface"),
    AttrEntry(Attr.NO_EXPAND_TRAIT, C, "no_expand_trait"),
    AttrEntry(Attr.ABSTRACT, C | F | T | K, "abstract"),
    AttrEntry(Attr.NO_OVERRIDE, C | F, "no_override"),
    AttrEntry(Attr.FINAL, C | F | T, "final"),
    AttrEntry(Attr.SEALED, C, "sealed"),
    AttrEntry(Attr.TRAIT, C | F | P, "trait"),
    AttrEntry(Attr.BUILTIN, C | F, "builtin"),
    AttrEntry(Attr.PERSISTENT, C | F | A, "persistent"),
    AttrEntry(Attr.IS_CONST, C | P, "is_const"),
    AttrEntry(Attr.INTERNAL, C | F | P | K, "internal"),
    # readonly
    AttrEntry(Attr.IS_READONLY, P | R, "readonly"),
    AttrEntry(Attr.READONLY_THIS, F, "readonly_this"),
    AttrEntry(Attr.READONLY_RETURN, F, "readonly_return"),
    AttrEntry(Attr.ENUM_CLASS, C, "enum_class"),
    # property initialisation
    AttrEntry(Attr.SYSTEM_INITIAL_VALUE, P, "sys_initial_val"),
    AttrEntry(Attr.NO_IMPLICIT_NULLABLE, P, "no_implicit_null"),
    AttrEntry(Attr.INITIAL_SATISFIES_TC, P, "initial_satisfies_tc"),
    AttrEntry(Attr.LATE_INIT, P, "late_init"),
    AttrEntry(Attr.NO_BAD_REDECLARE, P, "no_bad_redeclare"),
    # function behaviour
    AttrEntry(Attr.NO_INJECTION, F, "no_injection"),
    AttrEntry(Attr.INTERCEPTABLE, F, "interceptable"),
    AttrEntry(Attr.SUPPORTS_ASYNC_EAGER_RETURN, F, "support_async_eager_return"),
    AttrEntry(Attr.IS_FOLDABLE, F, "foldable"),
    AttrEntry(Attr.DYNAMICALLY_CALLABLE, F, "dyn_callable"),
    AttrEntry(Attr.DYNAMICALLY_CONSTRUCTIBLE, C, "dyn_constructible"),
    AttrEntry(Attr.NO_FCALL_BUILTIN, F, "no_fcall_builtin"),
    AttrEntry(Attr.VARIADIC_PARAM, F, "variadic_param"),
    AttrEntry(Attr.IS_METH_CALLER, F, "is_meth_caller"),
    AttrEntry(Attr.PROVENANCE_SKIP_FRAME, F, "prov_skip_frame"),
    # closures
    AttrEntry(Attr.IS_CLOSURE_CLASS, C, "is_closure_class"),
    AttrEntry(Attr.HAS_CLOSURE_COEFFECTS_PROP, C, "has_closure_coeffects_prop"),
)

TYPE_FLAG_TABLE: tuple[FlagEntry, ...] = (
    FlagEntry(TypeConstraintFlags.NULLABLE, "nullable"),
    FlagEntry(TypeConstraintFlags.EXTENDED_HINT, "extended_hint"),
    FlagEntry(TypeConstraintFlags.TYPE_VAR, "type_var"),
    FlagEntry(TypeConstraintFlags.SOFT, "soft"),
    FlagEntry(TypeConstraintFlags.TYPE_CONSTANT, "type_constant"),
    FlagEntry(TypeConstraintFlags.RESOLVED, "resolved"),
    FlagEntry(TypeConstraintFlags.DISPLAY_NULLABLE, "display_nullable"),
    FlagEntry(TypeConstraintFlags.UPPER_BOUND, "upper_bound"),
)

# NUM_ARGS_START and above is the packed argument count, not a flag.
FCALL_FLAG_TABLE: tuple[FlagEntry, ...] = (
    FlagEntry(FCallArgsFlags.HAS_UNPACK, "Unpack"),
    FlagEntry(FCallArgsFlags.HAS_GENERICS, "Generics"),
    FlagEntry(FCallArgsFlags.LOCK_WHILE_UNWINDING, "LockWhileUnwinding"),
    FlagEntry(FCallArgsFlags.SKIP_REPACK, "SkipRepack"),
    FlagEntry(FCallArgsFlags.SKIP_COEFFECTS_CHECK, "SkipCoeffectsCheck"),
    FlagEntry(FCallArgsFlags.ENFORCE_MUTABLE_RETURN, "EnforceMutableReturn"),
    FlagEntry(FCallArgsFlags.ENFORCE_READONLY_THIS, "EnforceReadonlyThis"),
    FlagEntry(FCallArgsFlags.EXPLICIT_CONTEXT, "ExplicitContext"),
    FlagEntry(FCallArgsFlags.HAS_IN_OUT, "HasInOut"),
    FlagEntry(FCallArgsFlags.ENFORCE_IN_OUT, "EnforceInOut"),
    FlagEntry(FCallArgsFlags.ENFORCE_READONLY, "EnforceReadonly"),
    FlagEntry(FCallArgsFlags.HAS_ASYNC_EAGER_OFFSET, "HasAsyncEagerOffset"),
)
