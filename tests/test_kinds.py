"""Tests for primitive kinds and typed storage cells.

Every bindable type is a ``Kind``.  Each kind knows its zero value,
which Python values are legal for it, and how to convert environment
text into a value, including range checks for the fixed-width integer
and float kinds.
"""

import math

import pytest

from py_getenv.kinds import ConversionError, Kind, Var

INT8_MIN = -128
INT8_MAX = 127
UINT8_MAX = 255
UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
FLOAT32_MAX = 3.4028234663852886e38


class TestKindBounds:
    """Verify integer ranges for each width."""

    def test_int8_bounds(self) -> None:
        """INT8 should span -128..127."""
        assert Kind.INT8.bounds == (INT8_MIN, INT8_MAX)

    def test_uint8_bounds(self) -> None:
        """UINT8 should span 0..255."""
        assert Kind.UINT8.bounds == (0, UINT8_MAX)

    def test_unsized_kinds_are_64_bit(self) -> None:
        """INT, UINT, and UINTPTR should all be 64 bits wide."""
        assert Kind.INT.bounds == Kind.INT64.bounds
        assert Kind.UINT.bounds == (0, UINT64_MAX)
        assert Kind.UINTPTR.bounds == (0, UINT64_MAX)

    def test_non_integer_kind_has_no_bounds(self) -> None:
        """Asking a float kind for integer bounds should raise TypeError."""
        with pytest.raises(TypeError):
            _ = Kind.FLOAT64.bounds

    def test_classification(self) -> None:
        """Each kind should fall into exactly one numeric family, or none."""
        assert Kind.INT16.is_signed
        assert not Kind.INT16.is_unsigned
        assert Kind.UINTPTR.is_unsigned
        assert Kind.FLOAT32.is_float
        assert not Kind.STRING.is_signed
        assert not Kind.BOOL.is_float


class TestKindZero:
    """Verify zero values."""

    def test_zero_values(self) -> None:
        """Zero values should match each kind's Python type."""
        assert Kind.STRING.zero() == ""
        assert Kind.BOOL.zero() is False
        assert Kind.INT32.zero() == 0
        assert Kind.FLOAT64.zero() == 0.0
        assert isinstance(Kind.FLOAT32.zero(), float)


class TestKindAccepts:
    """Verify which Python values are legal for each kind."""

    def test_string(self) -> None:
        """STRING accepts str only."""
        assert Kind.STRING.accepts("x")
        assert not Kind.STRING.accepts(1)

    def test_bool(self) -> None:
        """BOOL accepts bool only, not ints."""
        assert Kind.BOOL.accepts(True)
        assert not Kind.BOOL.accepts(1)

    def test_int_rejects_bool(self) -> None:
        """Integer kinds should not accept bool even though it subclasses int."""
        assert not Kind.INT.accepts(True)

    def test_int_range(self) -> None:
        """Integer kinds should only accept values inside their range."""
        assert Kind.INT8.accepts(INT8_MAX)
        assert not Kind.INT8.accepts(INT8_MAX + 1)
        assert not Kind.UINT16.accepts(-1)

    def test_float_requires_float(self) -> None:
        """Float kinds should not accept ints."""
        assert Kind.FLOAT64.accepts(1.5)
        assert not Kind.FLOAT64.accepts(1)

    def test_float32_range(self) -> None:
        """FLOAT32 should reject finite values beyond float32 range."""
        assert Kind.FLOAT32.accepts(FLOAT32_MAX)
        assert not Kind.FLOAT32.accepts(1e39)
        assert Kind.FLOAT32.accepts(math.inf)

    def test_float32_max_literal_accepted(self) -> None:
        """A Var given the printed float32 maximum should hold a legal value."""
        var = Var(Kind.FLOAT32, 3.4028235e38)
        assert var.value == FLOAT32_MAX
        assert Kind.FLOAT32.accepts(var.value)

    def test_float32_requires_exact_value(self) -> None:
        """A value float32 cannot represent exactly should be rejected."""
        assert not Kind.FLOAT32.accepts(0.1)
        assert Kind.FLOAT32.accepts(0.5)
        assert Kind.FLOAT64.accepts(0.1)


class TestConvertBool:
    """Verify boolean literal parsing."""

    @pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_literals(self, text: str) -> None:
        """All canonical true literals should convert to True."""
        assert Kind.BOOL.convert(text) is True

    @pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_literals(self, text: str) -> None:
        """All canonical false literals should convert to False."""
        assert Kind.BOOL.convert(text) is False

    @pytest.mark.parametrize("text", ["yes", "on", "tRUE", "2", ""])
    def test_other_text_fails(self, text: str) -> None:
        """Anything outside the literal set should fail."""
        with pytest.raises(ConversionError, match="invalid syntax"):
            Kind.BOOL.convert(text)


class TestConvertIntegers:
    """Verify signed and unsigned integer parsing."""

    def test_signed_with_sign(self) -> None:
        """Signed kinds should accept a leading + or -."""
        expected = -42
        assert Kind.INT32.convert("-42") == expected
        assert Kind.INT32.convert("+42") == -expected

    def test_signed_limits(self) -> None:
        """The extreme values of a width should parse."""
        assert Kind.INT8.convert("-128") == INT8_MIN
        assert Kind.INT64.convert(str(INT64_MIN)) == INT64_MIN

    def test_signed_overflow(self) -> None:
        """A value past the width should be a range error."""
        with pytest.raises(ConversionError, match="out of range"):
            Kind.INT8.convert("128")

    def test_unsigned_rejects_sign(self) -> None:
        """Unsigned kinds should reject any sign."""
        for text in ("-1", "+1"):
            with pytest.raises(ConversionError, match="invalid syntax"):
                Kind.UINT.convert(text)

    def test_unsigned_overflow(self) -> None:
        """UINT8 should reject 256."""
        with pytest.raises(ConversionError, match="out of range"):
            Kind.UINT8.convert("256")

    def test_uintptr_max(self) -> None:
        """UINTPTR should hold the full 64-bit range."""
        assert Kind.UINTPTR.convert(str(UINT64_MAX)) == UINT64_MAX

    @pytest.mark.parametrize("text", ["1_000", "0x10", "1.0", "1 2", "abc", "", "١٢"])
    def test_non_decimal_text_fails(self, text: str) -> None:
        """Only plain ASCII base-10 digits should be accepted."""
        with pytest.raises(ConversionError, match="invalid syntax"):
            Kind.INT.convert(text)

    def test_error_mentions_text(self) -> None:
        """The failure message should quote the offending text."""
        with pytest.raises(ConversionError, match="notanumber"):
            Kind.INT.convert("notanumber")


class TestConvertFloats:
    """Verify float parsing at each precision."""

    def test_decimal_and_scientific(self) -> None:
        """Decimal and exponent forms should both parse."""
        expected_decimal = 2.5
        expected_exp = 1500.0
        assert Kind.FLOAT64.convert("2.5") == expected_decimal
        assert Kind.FLOAT64.convert("1.5e3") == expected_exp
        assert Kind.FLOAT64.convert(".5") == expected_decimal / 5

    def test_special_values(self) -> None:
        """Infinity and NaN literals should parse."""
        assert Kind.FLOAT64.convert("-Inf") == -math.inf
        assert math.isnan(Kind.FLOAT32.convert("NaN"))

    def test_float32_rounds_to_single_precision(self) -> None:
        """FLOAT32 results should be rounded to float32 precision."""
        value = Kind.FLOAT32.convert("10.1")
        assert value != 10.1  # noqa: PLR2004
        assert value == pytest.approx(10.1, rel=1e-6)

    def test_float64_overflow(self) -> None:
        """A finite literal too large for float64 should be a range error."""
        with pytest.raises(ConversionError, match="out of range"):
            Kind.FLOAT64.convert("1e400")

    def test_float32_overflow(self) -> None:
        """A literal too large for float32 should be a range error."""
        with pytest.raises(ConversionError, match="out of range"):
            Kind.FLOAT32.convert("1e39")

    def test_float32_max_boundary(self) -> None:
        """The printed float32 maximum should parse; just past half an ulp above should not."""
        assert Kind.FLOAT32.convert("3.4028235e38") == FLOAT32_MAX
        assert Kind.FLOAT32.convert("-3.4028235e38") == -FLOAT32_MAX
        with pytest.raises(ConversionError, match="out of range"):
            Kind.FLOAT32.convert("3.40282357e38")

    @pytest.mark.parametrize("text", ["abc", "1_0.0", "1e", "0x1p3", "1.0f"])
    def test_bad_syntax(self, text: str) -> None:
        """Malformed float text should be a syntax error."""
        with pytest.raises(ConversionError, match="invalid syntax"):
            Kind.FLOAT64.convert(text)


class TestConvertString:
    """Verify string conversion."""

    def test_verbatim(self) -> None:
        r"""Strings should be stored verbatim, without unescaping."""
        assert Kind.STRING.convert(r"a\nb") == r"a\nb"


class TestVar:
    """Verify the typed storage cell."""

    def test_float32_value_rounded(self) -> None:
        """A FLOAT32 Var should hold the same value parsing its text would store."""
        var = Var(Kind.FLOAT32, 0.1)
        assert var.value == Kind.FLOAT32.convert("0.1")
        assert Kind.FLOAT32.accepts(var.value)

    def test_float32_overflowing_value_kept(self) -> None:
        """A value past float32 range is kept as given, for registration to reject."""
        assert Var(Kind.FLOAT32, 1e39).value == 1e39  # noqa: PLR2004

    def test_default_is_zero(self) -> None:
        """A Var without a value should hold the kind's zero value."""
        assert Var(Kind.UINT16).value == 0
        assert Var(Kind.STRING).value == ""

    def test_kind_is_read_only(self) -> None:
        """The kind should not be reassignable."""
        var = Var(Kind.INT)
        with pytest.raises(AttributeError):
            var.kind = Kind.STRING  # type: ignore[misc]

    def test_set_from_converts_in_place(self) -> None:
        """set_from should convert text and store the result on the same object."""
        var = Var(Kind.INT, 1)
        var.set_from("9090")
        expected = 9090
        assert var.value == expected

    def test_set_from_failure_leaves_value(self) -> None:
        """A failed conversion should not change the stored value."""
        var = Var(Kind.INT, 1)
        with pytest.raises(ConversionError):
            var.set_from("x")
        assert var.value == 1

    def test_repr(self) -> None:
        """Repr should include the kind and value."""
        text = repr(Var(Kind.INT, 8080))
        assert "INT" in text
        assert "8080" in text
