"""Library customers."""

from __future__ import annotations

from dataclasses import dataclass, field

from hoersaal.datum import Datum


@dataclass(frozen=True)
class Person:
    """A person with name and date of birth; birth defaults to today."""

    name: str = ""
    geburtsdatum: Datum = field(default_factory=Datum.today)