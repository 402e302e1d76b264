"""Integer kind table and input coercion tests."""

import numpy as np
import pytest

from pytarde import KINDS, I8, I64, I128, U8, U64, U128, IntKind, to_seconds
from pytarde._kinds import coerce, get_kind


class TestKindTable:
    def test_ten_kinds(self):
        assert sorted(KINDS) == sorted(
            ["u8", "u16", "u32", "u64", "u128", "i8", "i16", "i32", "i64", "i128"]
        )

    @pytest.mark.parametrize(
        "kind, lo, hi",
        [
            (U8, 0, 255),
            (I8, -128, 127),
            (U64, 0, 2**64 - 1),
            (I64, -(2**63), 2**63 - 1),
            (U128, 0, 2**128 - 1),
            (I128, -(2**127), 2**127 - 1),
        ],
    )
    def test_bounds(self, kind, lo, hi):
        assert kind.min == lo
        assert kind.max == hi

    def test_can_overflow_only_128_bit(self):
        wide = {k.name for k in KINDS.values() if k.can_overflow}
        assert wide == {"u128", "i128"}

    def test_str(self):
        assert str(U8) == "u8"


class TestGetKind:
    def test_by_name(self):
        assert get_kind("U16") is KINDS["u16"]

    def test_passthrough(self):
        kind = IntKind("u8", 8, False)
        assert get_kind(kind) is kind

    def test_unknown(self):
        with pytest.raises(ValueError, match="unknown integer kind"):
            get_kind("u7")


class TestCoerce:
    def test_plain_int_unbounded(self):
        assert coerce(2**200) == (2**200, None)

    def test_explicit_kind(self):
        assert coerce(200, "u8") == (200, U8)

    def test_out_of_kind_range(self):
        with pytest.raises(ValueError, match="out of range for u8"):
            coerce(256, "u8")

    def test_negative_for_unsigned_kind(self):
        with pytest.raises(ValueError):
            coerce(-1, "u32")

    @pytest.mark.parametrize("value", [True, 1.0, "1", None])
    def test_non_integer(self, value):
        with pytest.raises(TypeError):
            coerce(value)


class TestNumpyScalars:
    @pytest.mark.parametrize(
        "dtype, name",
        [
            (np.uint8, "u8"),
            (np.uint16, "u16"),
            (np.uint32, "u32"),
            (np.uint64, "u64"),
            (np.int8, "i8"),
            (np.int16, "i16"),
            (np.int32, "i32"),
            (np.int64, "i64"),
        ],
    )
    def test_kind_inferred(self, dtype, name):
        number, kind = coerce(dtype(7))
        assert number == 7
        assert type(number) is int
        assert kind is KINDS[name]

    def test_uint64_max(self):
        assert to_seconds(np.uint64(2**64 - 1)).as_secs() == 2**64 - 1

    def test_explicit_kind_overrides_dtype(self):
        with pytest.raises(ValueError):
            coerce(np.int64(300), "u8")

    def test_float_scalar_rejected(self):
        with pytest.raises(TypeError):
            coerce(np.float64(1.0))

    def test_bool_scalar_rejected(self):
        with pytest.raises(TypeError):
            coerce(np.bool_(True))
