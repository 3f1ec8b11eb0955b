from __future__ import annotations


class FactorialError(Exception):
    """Base class for every error raised by :mod:`factorials`."""


class InvalidArgument(FactorialError, ValueError):
    def __init__(self, detail: str, field: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.field = field


class ArithmeticOverflow(FactorialError, OverflowError):
    def __init__(self, n: int, bits: int) -> None:
        super().__init__(f"{n}! does not fit in a signed {bits}-bit integer")
        self.n = n
        self.bits = bits


class ConfigurationError(FactorialError):
    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"{name}={value!r}: {reason}")
        self.name = name
        self.value = value
