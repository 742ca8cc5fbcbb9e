"""Tests for snowid.utils.codec."""

import pytest

from snowid.core.exceptions import InvalidEncodingError
from snowid.schema import DecodeResult
from snowid.utils.codec import ALPHABET, ENCODED_LENGTH, decode, encode, parse_base32
from snowid.utils.snowflake import SnowflakeIDGenerator, compose


class TestAlphabet:
    def test_has_32_distinct_ascii_symbols(self) -> None:
        assert len(ALPHABET) == 32
        assert len(set(ALPHABET)) == 32
        assert ALPHABET.isascii()

    def test_excludes_ambiguous_symbols(self) -> None:
        for symbol in "0l2v":
            assert symbol not in ALPHABET

    def test_every_other_byte_is_rejected(self) -> None:
        valid = set(ALPHABET.encode("ascii"))
        for byte in range(256):
            if byte in valid:
                continue
            assert decode(b"y" * 12 + bytes([byte])) == (0, False)


class TestEncode:
    def test_fixed_width(self) -> None:
        gen = SnowflakeIDGenerator()
        for _ in range(100):
            encoded = encode(gen.generate_id(17))
            assert len(encoded) == ENCODED_LENGTH
            assert set(encoded) <= set(ALPHABET)

    def test_known_vectors(self) -> None:
        assert encode(0) == "yyyyyyyyyyyyy"
        assert encode(1) == "yyyyyyyyyyyyb"
        assert encode(31) == "yyyyyyyyyyyy9"
        assert encode(32) == "yyyyyyyyyyyby"
        assert encode(33) == "yyyyyyyyyyybb"
        assert encode(1 << 60) == "byyyyyyyyyyyy"

    def test_most_significant_digit_first(self) -> None:
        assert encode(3 * 32 + 2) == "yyyyyyyyyyydn"

    def test_small_ids_are_left_padded_with_zero_symbol(self) -> None:
        for value in range(32):
            assert encode(value) == "y" * 12 + ALPHABET[value]

    def test_negative_ids_use_twos_complement(self) -> None:
        assert encode(-1) == encode((1 << 64) - 1)
        assert encode(-1)[0] == ALPHABET[15]


class TestDecode:
    def test_round_trip_generated_ids(self) -> None:
        gen = SnowflakeIDGenerator()
        for _ in range(1000):
            snowflake_id = gen.generate_id(321)
            assert decode(encode(snowflake_id)) == (snowflake_id, True)

    @pytest.mark.parametrize(
        "snowflake_id",
        [
            32,
            1023,
            1 << 22,
            compose(123456789, 5, 4095),
            (1 << 63) - 1,
            -1,
            -(1 << 63),
        ],
    )
    def test_round_trip_edge_values(self, snowflake_id: int) -> None:
        assert decode(encode(snowflake_id)) == (snowflake_id, True)

    def test_round_trip_below_32(self) -> None:
        for value in range(32):
            assert decode(encode(value)) == (value, True)

    def test_accepts_bytes(self) -> None:
        assert decode(b"yyyyyyyyyyyby") == (32, True)

    def test_returns_named_result(self) -> None:
        result = decode("yyyyyyyyyyybb")
        assert isinstance(result, DecodeResult)
        assert result.id == 33
        assert result.success is True

    @pytest.mark.parametrize(
        "encoded",
        [
            "yyyyyyyyyyyy0",
            "Yyyyyyyyyyyyy",
            "yyyyyyl yyyyy",
            "yyyyyyyyyyyyé",
            b"yyyyyyyyyyyy\xff",
            b"\x00yyyyyyyyyyyy",
        ],
    )
    def test_rejects_symbols_outside_alphabet(self, encoded) -> None:
        snowflake_id, success = decode(encoded)
        assert success is False

    @pytest.mark.parametrize("encoded", ["", "y", "y" * 12, "y" * 14])
    def test_rejects_wrong_length(self, encoded: str) -> None:
        assert decode(encoded).success is False

    def test_overlong_values_wrap_to_64_bits(self) -> None:
        # 13 symbols carry 65 bits, the excess is dropped like a fixed-width int
        assert decode("9" * 13) == (-1, True)


class TestParseBase32:
    def test_returns_id(self) -> None:
        assert parse_base32("yyyyyyyyyyyby") == 32

    def test_raises_on_invalid_input(self) -> None:
        with pytest.raises(InvalidEncodingError):
            parse_base32("not-an-id-000")

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_base32("short")
