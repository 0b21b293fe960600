"""Iterator drills: capitalising words, checked division and factorials."""

from __future__ import annotations

import math
from collections.abc import Iterable

U64_MAX = (1 << 64) - 1


class DivisionError(ArithmeticError):
    """Base class for the ways a checked division can fail."""


class NotDivisibleError(DivisionError):
    """Raised when the dividend is not a whole multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not evenly divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((NotDivisibleError, self.dividend, self.divisor))

    def __repr__(self) -> str:
        return f"NotDivisibleError(dividend={self.dividend}, divisor={self.divisor})"


class DivideByZeroError(DivisionError):
    """Raised when the divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)

    def __repr__(self) -> str:
        return "DivideByZeroError()"


def capitalize_first(text: str) -> str:
    """Return ``text`` with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalise the first character of every word."""
    return [capitalize_first(word) for word in words]


def capitalize_join(words: Iterable[str]) -> str:
    """Capitalise every word and join them into one string."""
    return "".join(map(capitalize_first, words))


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when the division is exact.

    Raises DivideByZeroError for a zero divisor and NotDivisibleError when
    ``a`` is not a whole multiple of ``b``.
    """
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number by ``divisor``; the first failure is raised."""
    return [divide(number, divisor) for number in numbers]


def division_results(numbers: Iterable[int], divisor: int) -> list[int | DivisionError]:
    """Divide every number by ``divisor``, keeping each failure in place."""
    results: list[int | DivisionError] = []
    for number in numbers:
        try:
            results.append(divide(number, divisor))
        except DivisionError as error:
            results.append(error)
    return results


def factorial(num: int) -> int:
    """Return ``num!`` as an unsigned 64-bit value."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(1, num + 1))
    if result > U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result