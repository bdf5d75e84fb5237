from radix62.codec import (
    ALPHABET,
    DEFAULT_BASE,
    MAX_BASE,
    MAX_SAFE_INTEGER,
    MIN_BASE,
    Magnitude,
    Precision,
    char_value,
    decode,
    decode_magnitude,
    encode,
    is_valid_code,
    parse_base,
)
from radix62.errors import InvalidTypeError, OutOfRangeError, Radix62Error

__all__ = [
    "ALPHABET",
    "DEFAULT_BASE",
    "MAX_BASE",
    "MAX_SAFE_INTEGER",
    "MIN_BASE",
    "Magnitude",
    "Precision",
    "char_value",
    "decode",
    "decode_magnitude",
    "encode",
    "is_valid_code",
    "parse_base",
    "InvalidTypeError",
    "OutOfRangeError",
    "Radix62Error",
]
