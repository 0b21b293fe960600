"""Error-handling drills: name tags, token costs and validated integers."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO, Any

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly and without trimming."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the text of a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed-in quantity of items, fee included."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Tokens left after buying ``item_quantity`` items out of ``tokens``."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """Raised when a value cannot become a positive nonzero integer."""

    NEGATIVE = "Negative"
    ZERO = "Zero"

    def __init__(self, kind: str) -> None:
        if kind not in (self.NEGATIVE, self.ZERO):
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationError.ZERO)
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)


def read_and_validate(stream: IO[Any]) -> PositiveNonzeroInteger:
    """Read one line from ``stream`` and turn it into a positive integer.

    Errors from reading, parsing and validating all propagate to the caller.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))


def last_two(items: Sequence[Any]) -> tuple[Any | None, Any | None]:
    """The last and second-to-last items, with None where there is none."""
    last = items[-1] if len(items) >= 1 else None
    second_to_last = items[-2] if len(items) >= 2 else None
    return last, second_to_last