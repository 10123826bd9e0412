"""Library media: books, DVDs and magazines."""

from __future__ import annotations

import itertools
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from hoersaal.datum import Datum
from hoersaal.person import Person


class Medium(ABC):
    """Base class for every lendable medium; each gets a fresh ID."""

    _ids = itertools.count(1)

    def __init__(self, titel: str, out: Optional[TextIO] = None) -> None:
        self._id = next(Medium._ids)
        self.titel = titel
        self._out = out
        self._ausgeliehen = False
        self.datum_ausgeliehen: Optional[Datum] = None
        self.person_ausgeliehen: Optional[Person] = None

    @property
    def id(self) -> int:
        """The unique ID of this medium."""
        return self._id

    @property
    def ausgeliehen(self) -> bool:
        """Whether the medium is currently lent."""
        return self._ausgeliehen

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    @abstractmethod
    def describe(self) -> str:
        """Return all information about the medium as text."""
        lines = f"ID: {self._id}\nTitel: {self.titel}\n"
        if self._ausgeliehen:
            name = self.person_ausgeliehen.name if self.person_ausgeliehen else ""
            lines += (
                f"Status : Das Medium ist seit dem {self.datum_ausgeliehen} "
                f"an {name} ausgeliehen.\n"
            )
        else:
            lines += "Status: Medium ist zurzeit nicht verliehen.\n"
        return lines

    def ausleihen(self, person: Person, ausleihdatum: Datum) -> bool:
        """Lend the medium to ``person``; return whether it succeeded."""
        if self._ausgeliehen:
            self._write(f'Das Medium "{self.titel}" ist bereits verliehen!\n')
            return False
        self._ausgeliehen = True
        self.person_ausgeliehen = person
        self.datum_ausgeliehen = ausleihdatum
        self._write(f'Das Medium "{self.titel}" wird an {person.name} verliehen.\n')
        return True

    def zurueckgeben(self) -> None:
        """Return the medium to the library."""
        if self._ausgeliehen:
            self._ausgeliehen = False
            self._write(f'Das Medium "{self.titel}" wurde zurückgegeben.\n')
        else:
            self._write(f'Das Medium "{self.titel}" ist nicht verliehen!\n')


class Buch(Medium):
    """A book with an author."""

    def __init__(self, titel: str, autor: str, out: Optional[TextIO] = None) -> None:
        super().__init__(titel, out)
        self.autor = autor

    def describe(self) -> str:
        return super().describe() + f"Autor: {self.autor}\n"


class DVD(Medium):
    """A DVD with an age rating in years and a genre."""

    def __init__(
        self,
        titel: str,
        altersfreigabe: int,
        genre: str,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(titel, out)
        self.altersfreigabe = altersfreigabe
        self.genre = genre

    def describe(self) -> str:
        return (
            super().describe()
            + f"Altersfreigabe: {self.altersfreigabe}\nGenre: {self.genre}\n"
        )

    def ausleihen(self, person: Person, ausleihdatum: Datum) -> bool:
        """Lend only to persons old enough for the age rating."""
        if ausleihdatum - person.geburtsdatum < self.altersfreigabe * 12:
            self._write(
                f'Die Person ist zu jung um die DVD "{self.titel}" auszuleihen!\n'
            )
            return False
        return super().ausleihen(person, ausleihdatum)


class Magazin(Medium):
    """A magazine issue with publication date and section."""

    def __init__(
        self,
        titel: str,
        datum_ausgabe: Datum,
        sparte: str,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(titel, out)
        self.datum_ausgabe = datum_ausgabe
        self.sparte = sparte

    def describe(self) -> str:
        return (
            super().describe()
            + f"Erscheinungsdatum: {self.datum_ausgabe}\nSparte: {self.sparte}\n"
        )

    def ausleihen(self, person: Person, ausleihdatum: Datum) -> bool:
        """Lend only issues at most two months old."""
        if ausleihdatum - self.datum_ausgabe > 2:
            self._write(
                f'Das Medium "{self.titel}" kann nicht ausgeliehen werden, '
                "da es nicht die aktuelle Ausgabe ist!\n"
            )
            return False
        return super().ausleihen(person, ausleihdatum)