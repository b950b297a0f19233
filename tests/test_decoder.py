"""Tests for hhasflags.decoder: mask to name conversion and back."""

import pytest

from hhasflags.attr import ALL_CONTEXTS, Attr, AttrContext
from hhasflags.decoder import (
    UnknownFlagError,
    attrs_to_string,
    attrs_to_vec,
    context_label,
    fcall_flags_to_string,
    legal_attrs,
    string_to_attrs,
    string_to_fcall_flags,
    string_to_type_flags,
    type_flags_to_string,
)
from hhasflags.flag_data import ATTR_TABLE
from hhasflags.flags import FCallArgsFlags, TypeConstraintFlags

SINGLE_CONTEXTS = list(AttrContext)


# ---------------------------------------------------------------------------
# attrs_to_vec()
# ---------------------------------------------------------------------------


class TestAttrsToVec:
    @pytest.mark.parametrize("ctx", SINGLE_CONTEXTS)
    def test_zero_mask_is_empty(self, ctx: AttrContext) -> None:
        assert attrs_to_vec(ctx, Attr.NONE) == []

    def test_public_static_prop(self) -> None:
        assert attrs_to_vec(AttrContext.PROP, Attr.PUBLIC | Attr.STATIC) == ["public", "static"]

    def test_func_visibility_and_final(self) -> None:
        assert attrs_to_vec(AttrContext.FUNC, Attr.PUBLIC | Attr.FINAL) == ["public", "final"]

    def test_accepts_plain_int(self) -> None:
        assert attrs_to_vec(AttrContext.FUNC, 0x42) == ["public", "final"]

    def test_returns_new_list_each_call(self) -> None:
        first = attrs_to_vec(AttrContext.FUNC, Attr.PUBLIC)
        first.append("mutated")
        assert attrs_to_vec(AttrContext.FUNC, Attr.PUBLIC) == ["public"]

    def test_table_order_not_bit_order(self) -> None:
        # enum is bit 4 and no_dynamic_props is bit 0, but enum is listed first
        names = attrs_to_vec(AttrContext.CLASS, Attr.ENUM | Attr.FORBID_DYNAMIC_PROPS)
        assert names == ["enum", "no_dynamic_props"]

    def test_table_order_not_alphabetical(self) -> None:
        names = attrs_to_vec(AttrContext.CLASS, Attr.ABSTRACT | Attr.INTERFACE)
        assert names == ["interface", "abstract"]
        names = attrs_to_vec(AttrContext.FUNC, Attr.PRIVATE | Attr.PUBLIC | Attr.PROTECTED)
        assert names == ["public", "protected", "private"]

    def test_deterministic(self) -> None:
        mask = Attr.PUBLIC | Attr.STATIC | Attr.ABSTRACT | Attr.PERSISTENT | Attr.BUILTIN
        results = {tuple(attrs_to_vec(AttrContext.FUNC, mask)) for _ in range(20)}
        assert len(results) == 1


class TestContextSensitivity:
    def test_prop_only_bit_shown_for_prop(self) -> None:
        assert attrs_to_vec(AttrContext.PROP, Attr.LATE_INIT) == ["late_init"]

    def test_prop_only_bit_hidden_for_func(self) -> None:
        assert attrs_to_vec(AttrContext.FUNC, Attr.DEEP_INIT) == []

    def test_reused_bit_named_per_context(self) -> None:
        assert attrs_to_vec(AttrContext.CLASS, 1 << 0) == ["no_dynamic_props"]
        assert attrs_to_vec(AttrContext.PROP, 1 << 0) == ["deep_init"]
        assert attrs_to_vec(AttrContext.CLASS, 1 << 4) == ["enum"]
        assert attrs_to_vec(AttrContext.FUNC, 1 << 4) == ["static"]

    def test_three_way_reused_bit(self) -> None:
        assert attrs_to_vec(AttrContext.CLASS, 1 << 11) == ["sealed"]
        assert attrs_to_vec(AttrContext.FUNC, 1 << 11) == ["interceptable"]
        assert attrs_to_vec(AttrContext.PROP, 1 << 11) == ["late_init"]

    def test_combined_context_unions_names(self) -> None:
        ctx = AttrContext.CLASS | AttrContext.PROP
        assert attrs_to_vec(ctx, 1 << 0) == ["deep_init", "no_dynamic_props"]

    def test_combined_context_func_and_prop(self) -> None:
        ctx = AttrContext.FUNC | AttrContext.PROP
        assert attrs_to_vec(ctx, Attr.READONLY_RETURN | Attr.LATE_INIT) == [
            "readonly_return",
            "late_init",
            "interceptable",
        ]

    def test_alias_only_persistent(self) -> None:
        mask = Attr.PERSISTENT | Attr.PUBLIC | Attr.FINAL
        assert attrs_to_vec(AttrContext.ALIAS, mask) == ["persistent"]

    def test_parameter_readonly(self) -> None:
        assert attrs_to_vec(AttrContext.PARAMETER, Attr.IS_READONLY | Attr.PUBLIC) == ["readonly"]

    def test_constant_visibility_and_abstract(self) -> None:
        mask = Attr.PUBLIC | Attr.ABSTRACT | Attr.STATIC
        assert attrs_to_vec(AttrContext.CONSTANT, mask) == ["public", "abstract"]

    def test_trait_import(self) -> None:
        mask = Attr.PRIVATE | Attr.FINAL | Attr.PERSISTENT
        assert attrs_to_vec(AttrContext.TRAIT_IMPORT, mask) == ["private", "final"]

    def test_empty_context_names_nothing(self) -> None:
        assert attrs_to_vec(0, Attr.PUBLIC | Attr.ENUM) == []


class TestUnknownBits:
    def test_unused_max_is_never_named(self) -> None:
        assert attrs_to_vec(ALL_CONTEXTS, Attr.UNUSED_MAX) == []

    def test_unknown_bit_dropped_rest_kept(self) -> None:
        mask = int(Attr.PUBLIC) | (1 << 31) | (1 << 40)
        assert attrs_to_vec(AttrContext.FUNC, mask) == ["public"]

    def test_unknown_bits_in_other_spaces(self) -> None:
        assert type_flags_to_string(0x2 | 0x80 | TypeConstraintFlags.SOFT) == "soft"
        assert fcall_flags_to_string((5 << 12) | FCallArgsFlags.HAS_UNPACK) == "Unpack"


class TestSoundAndComplete:
    """Every emitted name is a set, legal bit; no set, legal bit is missed."""

    @pytest.mark.parametrize("ctx", SINGLE_CONTEXTS)
    def test_every_single_bit(self, ctx: AttrContext) -> None:
        for bit in range(33):
            mask = 1 << bit
            expected = [e.name for e in ATTR_TABLE if e.bit == mask and e.contexts & ctx]
            assert attrs_to_vec(ctx, mask) == expected

    @pytest.mark.parametrize("ctx", SINGLE_CONTEXTS)
    def test_all_bits_set(self, ctx: AttrContext) -> None:
        names = attrs_to_vec(ctx, 0xFFFFFFFF)
        assert names == [e.name for e in legal_attrs(ctx)]


# ---------------------------------------------------------------------------
# attrs_to_string()
# ---------------------------------------------------------------------------


class TestAttrsToString:
    @pytest.mark.parametrize("ctx", SINGLE_CONTEXTS)
    def test_zero_mask_is_empty_string(self, ctx: AttrContext) -> None:
        assert attrs_to_string(ctx, 0) == ""

    def test_single_name_has_no_separator(self) -> None:
        assert attrs_to_string(AttrContext.CLASS, Attr.FINAL) == "final"

    def test_joined_with_single_spaces(self) -> None:
        text = attrs_to_string(AttrContext.CLASS, Attr.ABSTRACT | Attr.FINAL | Attr.BUILTIN)
        assert text == "abstract final builtin"

    @pytest.mark.parametrize("ctx", SINGLE_CONTEXTS)
    def test_join_law(self, ctx: AttrContext) -> None:
        for mask in (0, 0x1, 0x42, 0x1F0, 0xFFFF, 0x3FFFFFFF, 0xFFFFFFFF):
            text = attrs_to_string(ctx, mask)
            assert text == " ".join(attrs_to_vec(ctx, mask))
            assert text == text.strip()
            assert "  " not in text

    def test_out_of_context_only_is_empty_string(self) -> None:
        assert attrs_to_string(AttrContext.ALIAS, Attr.LATE_INIT) == ""


# ---------------------------------------------------------------------------
# type_flags_to_string() / fcall_flags_to_string()
# ---------------------------------------------------------------------------


class TestTypeFlagsToString:
    def test_zero(self) -> None:
        assert type_flags_to_string(TypeConstraintFlags.NO_FLAGS) == ""

    def test_single(self) -> None:
        assert type_flags_to_string(TypeConstraintFlags.NULLABLE) == "nullable"

    def test_multiple_in_table_order(self) -> None:
        flags = TypeConstraintFlags.UPPER_BOUND | TypeConstraintFlags.SOFT | TypeConstraintFlags.NULLABLE
        assert type_flags_to_string(flags) == "nullable soft upper_bound"

    def test_every_flag(self) -> None:
        assert type_flags_to_string(0x37D) == (
            "nullable extended_hint type_var soft type_constant resolved "
            "display_nullable upper_bound"
        )


class TestFCallFlagsToString:
    def test_zero(self) -> None:
        assert fcall_flags_to_string(FCallArgsFlags.NONE) == ""

    def test_unpack_generics(self) -> None:
        flags = FCallArgsFlags.HAS_UNPACK | FCallArgsFlags.HAS_GENERICS
        assert fcall_flags_to_string(flags) == "Unpack Generics"

    def test_num_args_bits_ignored(self) -> None:
        assert fcall_flags_to_string(FCallArgsFlags.NUM_ARGS_START * 3) == ""

    def test_readonly_flags(self) -> None:
        flags = FCallArgsFlags.ENFORCE_READONLY | FCallArgsFlags.ENFORCE_MUTABLE_RETURN
        assert fcall_flags_to_string(flags) == "EnforceMutableReturn EnforceReadonly"


class TestIndependence:
    def test_same_mask_different_spaces(self) -> None:
        assert type_flags_to_string(0x1) == "nullable"
        assert fcall_flags_to_string(0x1) == "Unpack"
        assert attrs_to_string(AttrContext.CLASS, 0x1) == "no_dynamic_props"


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestStringToAttrs:
    def test_empty(self) -> None:
        assert string_to_attrs(AttrContext.FUNC, "") == Attr.NONE
        assert string_to_attrs(AttrContext.FUNC, "   ") == Attr.NONE

    def test_whitespace_tokens(self) -> None:
        mask = string_to_attrs(AttrContext.PROP, "public\tstatic\n late_init")
        assert mask == Attr.PUBLIC | Attr.STATIC | Attr.LATE_INIT

    def test_list_of_names(self) -> None:
        assert string_to_attrs(AttrContext.FUNC, ["public", "final"]) == 0x42

    def test_reused_bit_resolved_by_context(self) -> None:
        assert string_to_attrs(AttrContext.CLASS, "sealed") == 1 << 11
        assert string_to_attrs(AttrContext.FUNC, "interceptable") == 1 << 11

    def test_out_of_context_name_raises(self) -> None:
        with pytest.raises(UnknownFlagError) as exc_info:
            string_to_attrs(AttrContext.FUNC, "public late_init")
        assert exc_info.value.name == "late_init"
        assert exc_info.value.context == AttrContext.FUNC
        assert "func" in str(exc_info.value)

    def test_unknown_name_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="bogus"):
            string_to_attrs(AttrContext.CLASS, "bogus")

    @pytest.mark.parametrize("ctx", SINGLE_CONTEXTS)
    def test_round_trip_legal_masks(self, ctx: AttrContext) -> None:
        legal = 0
        for entry in legal_attrs(ctx):
            legal |= entry.bit
        for mask in (0, legal, legal & 0x5555_5555, legal & 0xAAAA_AAAA):
            assert string_to_attrs(ctx, attrs_to_string(ctx, mask)) == mask


class TestStringToFlags:
    def test_type_flags(self) -> None:
        flags = string_to_type_flags("nullable display_nullable")
        assert flags == TypeConstraintFlags.NULLABLE | TypeConstraintFlags.DISPLAY_NULLABLE
        assert isinstance(flags, TypeConstraintFlags)

    def test_fcall_flags(self) -> None:
        flags = string_to_fcall_flags("Unpack SkipRepack")
        assert flags == FCallArgsFlags.HAS_UNPACK | FCallArgsFlags.SKIP_REPACK

    def test_fcall_names_are_case_sensitive(self) -> None:
        with pytest.raises(UnknownFlagError) as exc_info:
            string_to_fcall_flags("unpack")
        assert exc_info.value.context is None

    def test_attr_name_not_a_type_flag(self) -> None:
        with pytest.raises(UnknownFlagError):
            string_to_type_flags("public")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestContextLabel:
    def test_single(self) -> None:
        assert context_label(AttrContext.TRAIT_IMPORT) == "trait_import"

    def test_combined(self) -> None:
        assert context_label(AttrContext.CLASS | AttrContext.PROP) == "class|prop"

    def test_empty(self) -> None:
        assert context_label(0) == "0x0"


class TestLegalAttrs:
    def test_alias(self) -> None:
        assert [e.name for e in legal_attrs(AttrContext.ALIAS)] == ["persistent"]

    def test_parameter(self) -> None:
        assert [e.name for e in legal_attrs(AttrContext.PARAMETER)] == ["readonly"]

    def test_all_contexts_is_whole_table(self) -> None:
        assert legal_attrs(ALL_CONTEXTS) == list(ATTR_TABLE)
