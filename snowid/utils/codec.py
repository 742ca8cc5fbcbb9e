"""
Textual codec for Snowflake IDs.

An ID is rendered as exactly 13 symbols of a 32-symbol alphabet, most
significant digit first. The alphabet leaves out visually ambiguous
characters, so it is not standard Base32. Short values are left-padded with
the zero-digit symbol "y", so every encoding is printable and exactly 13
symbols wide.

Negative IDs are encoded from their 64-bit two's-complement bits, and decode
maps them back to the signed value.
"""

from typing import Union

from snowid.core.exceptions import InvalidEncodingError
from snowid.schema import DecodeResult
from snowid.services.logger import setup_logger
from snowid.utils.int64 import INT64_MASK, to_signed64

ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
ENCODED_LENGTH = 13
INVALID = 0xFF

logger = setup_logger()


def _build_decode_table() -> bytes:
    table = bytearray([INVALID] * 256)
    for value, symbol in enumerate(ALPHABET.encode("ascii")):
        table[symbol] = value
    return bytes(table)


# Built once, when the module is first imported
_DECODE_TABLE = _build_decode_table()


def encode(snowflake_id: int) -> str:
    """Encode an ID as a 13-symbol string."""
    value = snowflake_id & INT64_MASK
    chars = []
    for _ in range(ENCODED_LENGTH):
        value, rem = divmod(value, 32)
        chars.append(ALPHABET[rem])
    chars.reverse()
    return "".join(chars)


def decode(encoded: Union[str, bytes]) -> DecodeResult:
    """Decode a 13-symbol string back into an ID.

    Never raises. Any symbol outside the alphabet, or an input that is not
    exactly 13 symbols long, gives DecodeResult(id=0, success=False).
    """
    if isinstance(encoded, str):
        try:
            encoded = encoded.encode("ascii")
        except UnicodeEncodeError:
            logger.debug("Rejected non-ASCII encoded ID %r", encoded)
            return DecodeResult(0, False)

    if len(encoded) != ENCODED_LENGTH:
        logger.debug("Rejected encoded ID of length %d", len(encoded))
        return DecodeResult(0, False)

    value = 0
    for byte in encoded:
        digit = _DECODE_TABLE[byte]
        if digit == INVALID:
            logger.debug("Rejected encoded ID %r, bad symbol %r", encoded, chr(byte))
            return DecodeResult(0, False)
        value = value * 32 + digit

    return DecodeResult(to_signed64(value), True)


def parse_base32(encoded: Union[str, bytes]) -> int:
    """Strict variant of decode.

    Raises:
        InvalidEncodingError: If the input is not a valid encoded ID.
    """
    snowflake_id, success = decode(encoded)
    if not success:
        raise InvalidEncodingError(f"Invalid encoded ID: {encoded!r}")
    return snowflake_id
