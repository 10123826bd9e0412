"""Calendar dates with month arithmetic as used by the library program."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from typing import Optional, TextIO

# Days per month as the library program counts them.
TAGE_MONAT = (31, 30, 31, 28, 31, 30, 31, 31, 30, 31, 30, 31)

MIN_JAHR = 1000
MAX_JAHR = 2021

_INT = re.compile(r"\s*([+-]?\d+)")


class DateFormatError(ValueError):
    """Raised when a date string cannot be parsed."""


def _read_int(text: str, pos: int) -> tuple[Optional[int], int]:
    match = _INT.match(text, pos)
    if match is None:
        return None, pos
    return int(match.group(1)), match.end()


@dataclass(frozen=True)
class Datum:
    """A date made of day, month and year."""

    tag: int
    monat: int
    jahr: int

    @classmethod
    def today(cls) -> Datum:
        """Return the current local date."""
        now = datetime.date.today()
        return cls(now.day, now.month, now.year)

    @classmethod
    def parse(cls, text: str) -> Datum:
        """Parse a date in the form ``TT.MM.JJJJ``.

        Raises :class:`DateFormatError` with the reason as its message.
        """
        if len(text) != 10:
            raise DateFormatError("Falsches Format!")

        tag, pos = _read_int(text, 0)
        if tag is None or text[pos:pos + 1] != ".":
            raise DateFormatError("Falsches Format!")
        pos += 1

        monat, pos = _read_int(text, pos)
        if monat is None or not 1 <= monat <= 12:
            raise DateFormatError("Ungültiger Monat!")
        if tag > TAGE_MONAT[monat - 1] or tag < 1:
            raise DateFormatError("Ungültiger tag!")
        if text[pos:pos + 1] != ".":
            raise DateFormatError("Falsches Format!")
        pos += 1

        jahr, _ = _read_int(text, pos)
        if jahr is None or not MIN_JAHR <= jahr <= MAX_JAHR:
            raise DateFormatError("Ungültiges Jahr!")
        return cls(tag, monat, jahr)

    def __str__(self) -> str:
        pad = "0" if self.monat < 10 else ""
        return f"{self.tag}.{pad}{self.monat}.{self.jahr}"

    def __sub__(self, other: object) -> int:
        """Return the number of whole months between ``other`` and this date."""
        if not isinstance(other, Datum):
            return NotImplemented
        monat_diff = self.monat - other.monat
        if self.tag - other.tag < 0:
            monat_diff -= 1
        return monat_diff + 12 * (self.jahr - other.jahr)

    def __add__(self, days: object) -> Datum:
        """Return the date ``days`` days later."""
        if not isinstance(days, int) or isinstance(days, bool):
            return NotImplemented
        tag = self.tag + days
        monat = self.monat
        jahr = self.jahr
        while tag > TAGE_MONAT[monat - 1]:
            tag -= TAGE_MONAT[monat - 1]
            monat += 1
            if monat > 12:
                monat -= 12
                jahr += 1
        return Datum(tag, monat, jahr)


def read_date(stdin: TextIO, stdout: TextIO) -> Datum:
    """Read whitespace-separated tokens until one is a valid date.

    Each rejected token is reported on ``stdout``. Raises :class:`EOFError`
    when the input ends first.
    """
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError
        for token in line.split():
            try:
                return Datum.parse(token)
            except DateFormatError as error:
                stdout.write(f"{error}\nBitte nochmal eingeben: ")