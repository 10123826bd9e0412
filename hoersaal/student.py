"""Student record shared by the list programs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Student:
    """A student with matriculation number, name, birthday and address.

    Students compare and hash by matriculation number alone.
    """

    mat_nr: int = 0
    name: str = ""
    geburtstag: str = ""
    adresse: str = ""

    def __str__(self) -> str:
        return (
            f"{self.name}, MatNr. {self.mat_nr}, geb. am "
            f"{self.geburtstag}, wohnhaft in {self.adresse}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.mat_nr == other.mat_nr

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.mat_nr < other.mat_nr

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.mat_nr > other.mat_nr

    def __hash__(self) -> int:
        return hash(self.mat_nr)