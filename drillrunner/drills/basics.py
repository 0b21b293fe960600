"""Basic drills: prices, numbers, strings, lists, tuples and simple records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple

BULK_THRESHOLD = 40
BULK_PRICE = 1
REGULAR_PRICE = 2

COLOR_WORDS = frozenset({"green", "blue", "red"})

FRUIT = "Pear"
VEGGIE = "Cucumber"

FILL_VALUES = (22, 44, 66)


def calculate_price(quantity: int) -> int:
    """Price of an order of apples: 2 each, or 1 each above 40 apples."""
    unit_price = BULK_PRICE if quantity > BULK_THRESHOLD else REGULAR_PRICE
    return quantity * unit_price


def times_two(num: int) -> int:
    """Return twice ``num``."""
    return num * 2


def is_even(num: int) -> bool:
    """Whether ``num`` is even."""
    return num % 2 == 0


def bigger(a: int, b: int) -> int:
    """Return the larger of ``a`` and ``b``."""
    return a if a > b else b


def sale_price(price: int) -> int:
    """Sale price: 10 off an even price, 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return ``num`` squared."""
    return num * num


def greet(text: str) -> str:
    """Return a greeting that starts with "Hello " followed by ``text``."""
    return f"Hello {text}"


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether ``attempt`` is one of the known colour words."""
    return attempt in COLOR_WORDS


def fill_vec(values: Iterable[int] | None = None) -> list[int]:
    """Return a new list of ``values`` followed by 22, 44 and 66.

    The input is left untouched; without input a fresh list is filled.
    """
    filled = list(values) if values is not None else []
    filled.extend(FILL_VALUES)
    return filled


def classify_char(ch: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def middle_slice(values: Sequence[Any]) -> Sequence[Any]:
    """The items at indices 1 to 3 inclusive."""
    if len(values) < 4:
        raise IndexError("sequence needs at least four items")
    return values[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a (name, age) pair as a sentence."""
    name, age = cat
    return f"{name} is {age} years old."


def second_of(numbers: Sequence[Any]) -> Any:
    """The second item of ``numbers``."""
    return numbers[1]


def favorite_snacks() -> str:
    """Name the favourite fruit and vegetable."""
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


@dataclass
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position: (name, hex)."""

    name: str
    hex: str


class UnitStruct:
    """A record with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitStruct):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(UnitStruct)