"""Tokenizing parser for human-readable duration strings.

A duration string is free text holding ``<digits><letters>`` tokens such as
``"2d 5h 30m"`` or ``"1d2h3m4s"``. Everything between tokens is skipped. Each
token's quantity is credited to the multiplier its unit resolves to, and the
per-multiplier sums are reduced to a total number of seconds.

A token without unit letters is credited at the minute multiplier, so ``"90"``
parses to 5400 seconds rather than 90.
"""

import logging
import string
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias

from timeduration.errors import NumberFormatError, UnknownUnitError
from timeduration.util import BARE_MULTIPLIER, UNITS

logger = logging.getLogger(__name__)

ParseMode: TypeAlias = Literal["permissive", "strict"]

DEFAULT_MODE: ParseMode = "permissive"

_MODES: tuple[ParseMode, ...] = ("permissive", "strict")

# ASCII only, unicode digits and letters separate tokens like punctuation
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


@dataclass(frozen=True, kw_only=True)
class Token:
    """A ``(quantity, unit)`` pair found in the source.

    ``multiplier`` is None when the unit is not in the unit table.
    ``position`` is the index of the quantity's first digit in the source.
    """

    quantity: int
    unit: str
    multiplier: int | None
    position: int


class Scanner:
    """Single left-to-right pass over a duration string."""

    def __init__(
        self,
        source: str,
        units: Mapping[str, int] = UNITS,
        *,
        mode: ParseMode = DEFAULT_MODE,
    ):
        if mode not in _MODES:
            valid = ", ".join(_MODES)
            raise ValueError(
                f"Invalid parse mode: {mode!r}\n"
                f"Valid modes: {valid}\n"
                f"Hint: Use mode='strict' to reject unknown units"
            )
        self.source: str = source
        self.units: Mapping[str, int] = units
        self.mode: ParseMode = mode

    def tokens(self) -> Iterator[Token]:
        """Yield tokens in source order."""
        source = self.source
        length = len(source)
        current = 0

        while current < length:
            start = current
            current += 1
            if source[start] not in _DIGITS:
                continue

            while current < length and source[current] in _DIGITS:
                current += 1
            digits_end = current

            # Unit letters must follow the digits immediately
            while current < length and source[current] in _LETTERS:
                current += 1

            unit = source[digits_end:current]
            yield Token(
                quantity=self._quantity(source[start:digits_end], start),
                unit=unit,
                multiplier=self._multiplier(unit, start),
                position=start,
            )

    def scan(self) -> dict[int, int]:
        """Return the accumulated quantity per multiplier.

        Quantities sharing a multiplier are summed, so ``"5m 10m"`` and
        ``"5minutes 10m"`` both give ``{60: 15}``.
        """
        result: dict[int, int] = {}
        for token in self.tokens():
            if token.multiplier is None:
                continue
            result[token.multiplier] = result.get(token.multiplier, 0) + token.quantity
        return result

    def total(self) -> int:
        """Reduce the scan to a number of seconds."""
        return sum(
            multiplier * value for multiplier, value in self.scan().items()
        )

    def _quantity(self, digits: str, position: int) -> int:
        try:
            return int(digits)
        except ValueError as exc:
            # Runs past the interpreter's int string conversion limit
            raise NumberFormatError(
                f"Cannot convert {len(digits)}-digit quantity at position "
                f"{position} to an integer.\n"
                f"Source: {self.source[:40]!r}...",
                source=self.source,
                position=position,
            ) from exc

    def _multiplier(self, unit: str, position: int) -> int | None:
        if not unit:
            return BARE_MULTIPLIER
        multiplier = self.units.get(unit)
        if multiplier is not None:
            return multiplier
        if self.mode == "strict":
            valid = ", ".join(self.units)
            raise UnknownUnitError(
                f"Unknown duration unit {unit!r} at position {position} "
                f"in {self.source!r}\n"
                f"Valid units: {valid}\n"
                f"Hint: Use mode='permissive' to skip unknown units",
                source=self.source,
                position=position,
                unit=unit,
            )
        logger.debug(
            "Skipping unknown unit %r at position %d in %r",
            unit,
            position,
            self.source,
        )
        return None


def parse(source: str, *, mode: ParseMode = DEFAULT_MODE) -> int:
    """Parse a duration string into a total number of seconds.

    Args:
        source: Text such as ``"2h 30m 15s"``, ``"1mo 2d"`` or ``"90"``
        mode: ``"permissive"`` (default) skips unknown units, ``"strict"``
            raises UnknownUnitError for them

    Returns:
        Total seconds. A string with no digits parses to 0.

    Raises:
        NumberFormatError: A digit run is too long to convert (any mode)
        UnknownUnitError: Unknown unit literal in strict mode
        ValueError: Invalid mode
    """
    return Scanner(source, mode=mode).total()
