"""
radix62 예외 정의
InvalidTypeError: 인자 타입 오류 / OutOfRangeError: 값·진법·문자 범위 오류
"""


class Radix62Error(Exception):
    """코덱 예외 공통 부모."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class InvalidTypeError(Radix62Error, TypeError):
    """value/str 인자가 허용된 타입이 아닐 때."""


class OutOfRangeError(Radix62Error, ValueError):
    """base 범위 밖, 음수 value, 진법에 맞지 않는 문자."""

    def __init__(self, message: str, value=None, char=None, position=None, base=None):
        super().__init__(message, value)
        self.char = char
        self.position = position
        self.base = base
