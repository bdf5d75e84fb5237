"""
로컬 유닛 테스트 - radix62 인코딩/디코딩 핵심 로직 검증
"""

import os
import sys
import threading

import pytest

# src 경로 추가
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from radix62 import (
    ALPHABET,
    MAX_SAFE_INTEGER,
    InvalidTypeError,
    Magnitude,
    OutOfRangeError,
    Precision,
    Radix62Error,
    char_value,
    decode,
    decode_magnitude,
    encode,
    is_valid_code,
    parse_base,
)

ALL_BASES = range(2, 63)
BIG_VALUE = 123456789012345678901234567890


def test_alphabet_table():
    """알파벳 순서 및 역방향 조회 일치"""
    assert ALPHABET == "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert len(set(ALPHABET)) == 62
    for i, char in enumerate(ALPHABET):
        assert char_value(char) == i
    assert char_value("!") == -1
    assert char_value("é") == -1


def test_encode_decode_roundtrip():
    """encode -> decode 시 원래 숫자로 복원되는지 검증"""
    for num in [0, 1, 61, 62, 100, 1000, 123456, MAX_SAFE_INTEGER, BIG_VALUE]:
        assert decode(encode(num)) == num, f"Failed for num={num}"


@pytest.mark.parametrize("base", ALL_BASES)
def test_roundtrip_all_bases(base):
    for num in [0, 1, base - 1, base, 500, 12345, MAX_SAFE_INTEGER + 1, BIG_VALUE]:
        encoded = encode(num, base)
        assert all(char_value(c) < base for c in encoded)
        assert decode(encoded, base) == num


def test_encode_specific_values():
    """알려진 값 검증"""
    assert encode(0) == "0"
    assert encode(1) == "1"
    assert encode(61) == "Z"
    assert encode(62) == "10"
    assert encode(12345) == "3d7"
    assert encode(255) == "47"
    assert encode(1024) == "gw"
    assert encode(MAX_SAFE_INTEGER) == "FfGNdXsE7"


def test_encode_custom_bases():
    assert encode(255, 16) == "ff"
    assert encode(256, 16) == "100"
    assert encode(8, 2) == "1000"
    assert encode(1295, 36) == "zz"
    assert encode(12345, 10) == "12345"


def test_decode_specific_values():
    """알려진 문자열 검증"""
    assert decode("0") == 0
    assert decode("1") == 1
    assert decode("Z") == 61
    assert decode("10") == 62
    assert decode("3d7") == 12345
    assert decode("10", 36) == 36
    assert decode("ff", 16) == 255
    assert decode("FfGNdXsE7") == MAX_SAFE_INTEGER


@pytest.mark.parametrize("base", ALL_BASES)
def test_zero_and_empty_string(base):
    assert encode(0, base) == "0"
    assert decode("", base) == 0
    assert decode_magnitude("", base) == Magnitude(0, Precision.NATIVE)


@pytest.mark.parametrize("base", ALL_BASES)
def test_single_digits(base):
    for i in range(base):
        assert encode(i, base) == ALPHABET[i]
        assert decode(ALPHABET[i], base) == i


@pytest.mark.parametrize("base", [2, 10, 16, 36, 62])
def test_powers_of_base(base):
    for k in range(0, 12):
        assert encode(base**k, base) == "1" + "0" * k


def test_precision_boundary():
    at_limit = decode_magnitude(encode(MAX_SAFE_INTEGER))
    assert at_limit == Magnitude(MAX_SAFE_INTEGER, Precision.NATIVE)

    above = decode_magnitude(encode(MAX_SAFE_INTEGER + 1))
    assert above.value == MAX_SAFE_INTEGER + 1
    assert above.precision is Precision.BIG


def test_big_value_roundtrip():
    encoded = encode(BIG_VALUE)
    assert len(encoded) > 11
    result = decode_magnitude(encoded)
    assert result.value == BIG_VALUE
    assert result.precision is Precision.BIG
    assert decode(encode(int("9" * 101))) == int("9" * 101)


def test_encode_accepts_magnitude():
    assert encode(Magnitude(12345, Precision.NATIVE)) == "3d7"
    assert encode(decode_magnitude(encode(BIG_VALUE))) == encode(BIG_VALUE)


@pytest.mark.parametrize("base", [0, 1, 63, -1, 100, 2.5, 16.7, "16", None, True])
def test_invalid_base(base):
    with pytest.raises(OutOfRangeError, match="between 2 and 62"):
        encode(100, base)
    with pytest.raises(OutOfRangeError, match="between 2 and 62"):
        decode("100", base)


def test_encode_negative_value():
    with pytest.raises(OutOfRangeError, match="non-negative") as excinfo:
        encode(-1)
    assert excinfo.value.value == -1
    with pytest.raises(OutOfRangeError):
        encode(-1000, 16)


@pytest.mark.parametrize("value", ["123", None, {}, 1.0, b"1", False])
def test_encode_invalid_type(value):
    with pytest.raises(InvalidTypeError):
        encode(value)


def test_encode_checks_base_before_type():
    with pytest.raises(OutOfRangeError):
        encode("123", 1)


@pytest.mark.parametrize("value", [123, None, {}, b"3d7"])
def test_decode_invalid_type(value):
    with pytest.raises(InvalidTypeError):
        decode(value)


def test_decode_checks_type_before_base():
    with pytest.raises(InvalidTypeError):
        decode(123, 1)


def test_decode_char_out_of_base():
    with pytest.raises(OutOfRangeError) as excinfo:
        decode("f", 15)
    err = excinfo.value
    assert err.char == "f"
    assert err.position == 0
    assert err.base == 15
    with pytest.raises(OutOfRangeError, match='"z"'):
        decode("z", 35)


@pytest.mark.parametrize("s", ["!@#", "abc@def", "123!456", " 1", "é"])
def test_decode_char_outside_alphabet(s):
    with pytest.raises(OutOfRangeError):
        decode(s)


def test_error_kinds_distinguishable():
    """호출자가 메시지 파싱 없이 종류로 분기 가능"""
    assert issubclass(InvalidTypeError, TypeError)
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(InvalidTypeError, Radix62Error)
    assert issubclass(OutOfRangeError, Radix62Error)
    assert not issubclass(InvalidTypeError, ValueError)


def test_parse_base():
    assert parse_base(None) == 62
    assert parse_base("") == 62
    assert parse_base(" 16 ") == 16
    assert parse_base("2") == 2
    for raw in ["1", "63", "-5", "abc", "2.5"]:
        with pytest.raises(OutOfRangeError, match="between 2 and 62"):
            parse_base(raw)


def test_is_valid_code():
    assert is_valid_code("3d7")
    assert is_valid_code("ff", 16)
    assert not is_valid_code("fg", 16)
    assert not is_valid_code("")
    assert not is_valid_code("a-b")
    assert not is_valid_code(None)
    with pytest.raises(OutOfRangeError):
        is_valid_code("1", 63)


def test_concurrent_calls():
    """읽기 전용 테이블만 공유하므로 스레드 동시 호출 안전"""
    errors = []

    def worker(offset):
        for num in range(offset, offset + 2000):
            if decode(encode(num, 36), 36) != num:
                errors.append(num)

    threads = [threading.Thread(target=worker, args=(i * 2000,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []


if __name__ == "__main__":
    test_encode_decode_roundtrip()
    test_encode_specific_values()
    test_decode_specific_values()
    print("All tests passed.")
