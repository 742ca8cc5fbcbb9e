"""Time-ordered 64-bit unique IDs and their 13-symbol textual form."""

from snowid.core.constants import (
    EPOCH,
    MAX_NODE_ID,
    MAX_SEQUENCE,
    MAX_TIMESTAMP,
    NODE_ID_BITS,
    SEQUENCE_BITS,
    TIMESTAMP_BITS,
)
from snowid.core.exceptions import (
    InvalidEncodingError,
    NodeIDOutOfRangeError,
    SnowflakeError,
)
from snowid.schema import DecodeResult, SnowflakeParts
from snowid.utils.codec import ALPHABET, ENCODED_LENGTH, decode, encode, parse_base32
from snowid.utils.snowflake import (
    SnowflakeIDGenerator,
    compose,
    decompose,
    generate,
    generation_time,
)

__all__ = [
    "ALPHABET",
    "ENCODED_LENGTH",
    "EPOCH",
    "MAX_NODE_ID",
    "MAX_SEQUENCE",
    "MAX_TIMESTAMP",
    "NODE_ID_BITS",
    "SEQUENCE_BITS",
    "TIMESTAMP_BITS",
    "DecodeResult",
    "InvalidEncodingError",
    "NodeIDOutOfRangeError",
    "SnowflakeError",
    "SnowflakeIDGenerator",
    "SnowflakeParts",
    "compose",
    "decode",
    "decompose",
    "encode",
    "generate",
    "generation_time",
    "parse_base32",
]
