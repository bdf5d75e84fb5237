"""
Base62 인코딩/디코딩 (URL 단축용)
문자集: 0-9, a-z, A-Z (62자), 진법 2~62 지원
"""

import enum
from typing import NamedTuple

from radix62.errors import InvalidTypeError, OutOfRangeError

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
MIN_BASE = 2
MAX_BASE = len(ALPHABET)
DEFAULT_BASE = MAX_BASE

# JSON/JavaScript 쪽에서 정확히 표현 가능한 최대 정수 (2^53 - 1)
MAX_SAFE_INTEGER = 2**53 - 1

_INVALID = -1
_CHAR_TO_VALUE = {char: i for i, char in enumerate(ALPHABET)}


class Precision(enum.Enum):
    NATIVE = "native"
    BIG = "big"


class Magnitude(NamedTuple):
    """디코딩 결과 값 + 정밀도 구분 태그."""

    value: int
    precision: Precision

    @classmethod
    def of(cls, value: int) -> "Magnitude":
        if value <= MAX_SAFE_INTEGER:
            return cls(value, Precision.NATIVE)
        return cls(value, Precision.BIG)


def char_value(char: str) -> int:
    """문자 -> 자릿값. 알파벳에 없으면 -1"""
    return _CHAR_TO_VALUE.get(char, _INVALID)


def _check_base(base) -> None:
    # bool은 int 하위 타입이지만 진법으로는 받지 않음
    if (
        not isinstance(base, int)
        or isinstance(base, bool)
        or base < MIN_BASE
        or base > MAX_BASE
    ):
        raise OutOfRangeError(
            f"base must be an integer between {MIN_BASE} and {MAX_BASE}, got {base!r}",
            value=base,
        )


def parse_base(raw: str | None) -> int:
    """설정 문자열 -> 검증된 진법. 비어 있으면 DEFAULT_BASE"""
    raw = (raw or "").strip()
    if not raw:
        return DEFAULT_BASE
    try:
        base = int(raw)
    except ValueError:
        raise OutOfRangeError(
            f"base must be an integer between {MIN_BASE} and {MAX_BASE}, got {raw!r}",
            value=raw,
        ) from None
    _check_base(base)
    return base


def encode(value: int | Magnitude, base: int = DEFAULT_BASE) -> str:
    """정수 -> base 진법 문자열

    검증 순서: base 범위 -> value 타입 -> value 부호
    """
    _check_base(base)

    if isinstance(value, Magnitude):
        num = value.value
    elif isinstance(value, int) and not isinstance(value, bool):
        num = value
    else:
        raise InvalidTypeError(
            f"value must be an int or Magnitude, got {type(value).__name__}",
            value=value,
        )

    if num < 0:
        raise OutOfRangeError(f"value must be non-negative, got {num}", value=num)

    if num == 0:
        return ALPHABET[0]

    digits = []
    while num > 0:
        num, rem = divmod(num, base)
        digits.append(ALPHABET[rem])
    return "".join(reversed(digits))


def decode_magnitude(s: str, base: int = DEFAULT_BASE) -> Magnitude:
    """base 진법 문자열 -> Magnitude (NATIVE / BIG 태그 포함)

    빈 문자열은 0으로 디코딩한다.
    """
    if not isinstance(s, str):
        raise InvalidTypeError(
            f"str must be a string, got {type(s).__name__}", value=s
        )
    _check_base(base)

    num = 0
    for position, char in enumerate(s):
        digit = char_value(char)
        if digit == _INVALID or digit >= base:
            raise OutOfRangeError(
                f'invalid character "{char}" at position {position} for base {base}',
                value=s,
                char=char,
                position=position,
                base=base,
            )
        num = num * base + digit
    return Magnitude.of(num)


def decode(s: str, base: int = DEFAULT_BASE) -> int:
    """base 진법 문자열 -> 정수"""
    return decode_magnitude(s, base).value


def is_valid_code(s, base: int = DEFAULT_BASE) -> bool:
    """s가 base 진법 숫자 문자열(빈 문자열 제외)인지 여부"""
    _check_base(base)
    if not isinstance(s, str) or not s:
        return False
    return all(0 <= char_value(char) < base for char in s)
