"""Tests for imeitype.core.imei — construction, conversions, sub-fields, equality."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from strategies import imeis, magnitudes, valid_imei_numbers

from imeitype.core.errors import ImeiFormatError, InvalidFormat
from imeitype.core.imei import (
    INVALID_IMEI,
    Imei,
    explain_invalid,
    is_valid,
    parse_int,
    parse_text,
    parse_utf8,
    try_parse,
    try_parse_or_invalid,
)
from imeitype.core.layout import INVALID_VALUE, MAX_VALUE, MIN_VALUE
from imeitype.core.parsers import ValidationMode
from imeitype.core.result import Err, Ok, unwrap

SAMPLES = (490154203237518, 356303489916807, 352099001761481, 10000000000008, MIN_VALUE, MAX_VALUE)

# ---------------------------------------------------------------------------
# Parse-or-fail
# ---------------------------------------------------------------------------


class TestParseOrFail:
    def test_text_sub_fields(self) -> None:
        imei = Imei.from_text("356303489916807")
        assert imei.tac == 35
        assert imei.fac == 630348
        assert imei.snr == 991680

    def test_each_encoding_same_value(self) -> None:
        assert (
            Imei.from_text("490154203237518")
            == Imei.from_int(490154203237518)
            == Imei.from_utf8(b"490154203237518")
            == Imei.of("490154203237518")
        )

    @pytest.mark.parametrize("raw", [123456789012345, "123456789012345", b"123456789012345"])
    def test_bad_checksum_raises(self, raw: int | str | bytes) -> None:
        with pytest.raises(ImeiFormatError) as exc_info:
            Imei.of(raw)
        assert exc_info.value.raw == "123456789012345"
        assert isinstance(exc_info.value.error, InvalidFormat)

    def test_empty_text_raises(self) -> None:
        with pytest.raises(ImeiFormatError, match="not a valid IMEI"):
            Imei.from_text("")

    def test_none_raises(self) -> None:
        with pytest.raises(ImeiFormatError):
            Imei.from_text(None)

    def test_zero_raises(self) -> None:
        with pytest.raises(ImeiFormatError):
            Imei.from_int(0)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Imei.from_int(123456789012345)


# ---------------------------------------------------------------------------
# Validation mode
# ---------------------------------------------------------------------------


class TestValidationMode:
    def test_syntax_only_stores_exact_value(self) -> None:
        imei = Imei.from_int(123456789012345, mode=ValidationMode.SYNTAX_ONLY)
        assert imei.to_int() == 123456789012345
        assert not is_valid(imei)

    def test_syntax_only_text(self) -> None:
        imei = Imei.from_text("123456789012345", mode=ValidationMode.SYNTAX_ONLY)
        assert imei.to_int() == 123456789012345

    def test_syntax_only_still_parses(self) -> None:
        with pytest.raises(ImeiFormatError):
            Imei.from_text("not-an-imei", mode=ValidationMode.SYNTAX_ONLY)

    def test_strict_is_default(self) -> None:
        with pytest.raises(ImeiFormatError):
            Imei.from_text("123456789012345")

    def test_mode_does_not_leak_between_calls(self) -> None:
        Imei.from_int(123456789012345, mode=ValidationMode.SYNTAX_ONLY)
        with pytest.raises(ImeiFormatError):
            Imei.from_int(123456789012345)


# ---------------------------------------------------------------------------
# Try-parse
# ---------------------------------------------------------------------------


class TestTryParse:
    def test_ok(self) -> None:
        assert try_parse("490154203237518") == Ok(Imei(490154203237518))

    def test_zero_fails_with_sentinel(self) -> None:
        result = try_parse(0)
        assert isinstance(result, Err)
        assert result.unwrap_or(INVALID_IMEI).to_int() == INVALID_VALUE

    def test_pair_form(self) -> None:
        assert try_parse_or_invalid(0) == (False, INVALID_IMEI)
        assert try_parse_or_invalid("356303489916807") == (True, Imei(356303489916807))

    @pytest.mark.parametrize("raw", ["123456789012345", "490154203123", "", None])
    def test_invalid_text(self, raw: str | None) -> None:
        assert isinstance(parse_text(raw), Err)

    def test_per_encoding(self) -> None:
        assert unwrap(parse_int(356303489916807)) == Imei(356303489916807)
        assert unwrap(parse_utf8(b"356303489916807")) == Imei(356303489916807)
        assert isinstance(parse_int(490154203123), Err)

    def test_never_raises_on_wrong_type(self) -> None:
        assert isinstance(try_parse(3.5), Err)  # type: ignore[arg-type]

    def test_static_parse_alias(self) -> None:
        assert Imei.parse("490154203237518") == try_parse("490154203237518")

    def test_pattern_match(self) -> None:
        match Imei.parse("490154203237518"):
            case Ok(Imei(value=v)):
                assert v == 490154203237518
            case _:
                pytest.fail("Should match Ok(Imei)")


# ---------------------------------------------------------------------------
# Conversions and sub-fields
# ---------------------------------------------------------------------------


class TestConversions:
    def test_to_int(self) -> None:
        assert Imei(490154203237518).to_int() == 490154203237518
        assert int(Imei(490154203237518)) == 490154203237518

    def test_to_text(self) -> None:
        assert Imei(490154203237518).to_text() == "490154203237518"
        assert str(Imei(490154203237518)) == "490154203237518"

    def test_to_utf8(self) -> None:
        assert Imei(490154203237518).to_utf8() == b"490154203237518"
        assert bytes(Imei(490154203237518)) == b"490154203237518"

    def test_to_chars(self) -> None:
        assert Imei(356303489916807).to_chars() == tuple("356303489916807")

    def test_to_digits(self) -> None:
        assert Imei(MIN_VALUE).to_digits() == (0,) * 13 + (1, 8)

    def test_leading_zeros_padded(self) -> None:
        assert Imei(MIN_VALUE).to_text() == "000000000000018"
        assert Imei(MIN_VALUE).to_utf8() == b"000000000000018"

    def test_leading_zero_tac(self) -> None:
        imei = Imei.from_text("010000000000008")
        assert imei.to_int() == 10000000000008
        assert imei.tac == 1
        assert imei.fac == 0
        assert imei.snr == 0
        assert imei.to_text() == "010000000000008"

    def test_sub_fields_second_sample(self) -> None:
        imei = Imei(490154203237518)
        assert (imei.tac, imei.fac, imei.snr) == (49, 15420, 323751)

    def test_max_value_sub_fields(self) -> None:
        imei = Imei(MAX_VALUE)
        assert (imei.tac, imei.fac, imei.snr) == (99, 999999, 999999)

    @given(valid_imei_numbers())
    def test_text_round_trip(self, number: int) -> None:
        assert Imei.from_text(Imei.from_int(number).to_text()).to_int() == number

    @given(valid_imei_numbers())
    def test_utf8_round_trip(self, number: int) -> None:
        assert Imei.from_utf8(Imei.from_int(number).to_utf8()).to_int() == number

    @given(imeis())
    def test_sub_fields_recompose(self, imei: Imei) -> None:
        text = imei.to_text()
        assert imei.tac == int(text[0:2])
        assert imei.fac == int(text[2:8])
        assert imei.snr == int(text[8:14])


# ---------------------------------------------------------------------------
# Validity
# ---------------------------------------------------------------------------


class TestIsValid:
    def test_sentinel_invalid(self) -> None:
        assert not is_valid(INVALID_IMEI)

    def test_each_encoding(self) -> None:
        assert is_valid(Imei(490154203237518))
        assert is_valid(490154203237518)
        assert is_valid("490154203237518")
        assert is_valid(b"490154203237518")

    def test_boundaries(self) -> None:
        assert is_valid(MIN_VALUE)
        assert is_valid(MAX_VALUE)
        assert not is_valid(MIN_VALUE - 1)
        assert not is_valid(MAX_VALUE + 1)
        assert not is_valid(0)

    def test_none(self) -> None:
        assert not is_valid(None)


class TestExplainInvalid:
    def test_valid_is_none(self) -> None:
        assert explain_invalid(Imei(490154203237518)) is None
        assert explain_invalid("490154203237518") is None
        assert explain_invalid(490154203237518) is None
        assert explain_invalid(b"490154203237518") is None

    def test_length(self) -> None:
        assert explain_invalid("123") == "must be 15 characters, got 3"

    def test_checksum(self) -> None:
        reason = explain_invalid("123456789012345")
        assert reason is not None
        assert "Luhn" in reason

    def test_range(self) -> None:
        reason = explain_invalid(0)
        assert reason is not None
        assert "outside" in reason

    def test_none(self) -> None:
        assert explain_invalid(None) == "input is None"

    def test_sentinel_explained_like_its_magnitude(self) -> None:
        assert explain_invalid(INVALID_IMEI) == explain_invalid(INVALID_VALUE)

    def test_syntax_only_imei_explained(self) -> None:
        imei = Imei.from_int(123456789012345, mode=ValidationMode.SYNTAX_ONLY)
        reason = explain_invalid(imei)
        assert reason is not None
        assert "Luhn" in reason

    @given(magnitudes())
    def test_agrees_with_is_valid(self, number: int) -> None:
        imei = Imei(number)
        assert (explain_invalid(imei) is None) == is_valid(imei)


# ---------------------------------------------------------------------------
# Equality, hashing, immutability
# ---------------------------------------------------------------------------


class TestEquality:
    def test_equal_values(self) -> None:
        assert Imei(490154203237518) == Imei.from_text("490154203237518")

    def test_unequal_values(self) -> None:
        assert Imei(490154203237518) != Imei(356303489916807)

    def test_not_equal_to_int(self) -> None:
        assert Imei(490154203237518) != 490154203237518

    def test_hash_consistent(self) -> None:
        assert hash(Imei(490154203237518)) == hash(Imei.from_utf8(b"490154203237518"))

    def test_sample_hashes_distinct(self) -> None:
        hashes = {hash(Imei(n)) for n in SAMPLES}
        assert len(hashes) == len(SAMPLES)

    def test_usable_as_dict_key(self) -> None:
        seen = {Imei(490154203237518): "a"}
        assert seen[Imei.from_text("490154203237518")] == "a"

    def test_no_ordering(self) -> None:
        with pytest.raises(TypeError):
            _ = Imei(490154203237518) < Imei(356303489916807)  # type: ignore[operator]

    def test_frozen(self) -> None:
        imei = Imei(490154203237518)
        with pytest.raises(dataclasses.FrozenInstanceError):
            imei.value = 1  # type: ignore[misc]

    @given(imeis(), imeis())
    def test_equal_implies_same_hash(self, a: Imei, b: Imei) -> None:
        if a == b:
            assert hash(a) == hash(b)


class TestTrustedConstructor:
    def test_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            Imei(True)

    def test_rejects_negative(self) -> None:
        with pytest.raises(TypeError):
            Imei(-1)

    def test_rejects_16_digits(self) -> None:
        with pytest.raises(TypeError):
            Imei(10**15)

    def test_does_not_check_luhn(self) -> None:
        assert Imei(123456789012345).to_int() == 123456789012345
