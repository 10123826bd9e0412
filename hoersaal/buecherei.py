"""Interactive library program lending books, DVDs and magazines."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from hoersaal.datum import Datum, read_date
from hoersaal.medium import DVD, Buch, Magazin, Medium
from hoersaal.person import Person

SEPARATOR = "*************************************************************"

MENU = (
    "\n"
    "Menue:\n"
    "-----------------------------\n"
    "(1): Medium hinzufügen\n"
    "(2): Medium löschen\n"
    "(3): Datenbank ausgeben\n"
    "(4): Ein Medium verleihen\n"
    "(5): Ein Medium zurücknehmen\n"
    "(6): Ausgeliehene Medien anzeigen\n"
    "(7): Beenden\n"
)

MEDIUM_MENU = (
    "Geben Sie die Art des Mediums ein: \n"
    "(1): Buch\n"
    "(2): Magazin\n"
    "(3): DVD\n"
)


class Library:
    """A collection of media driven by a text menu on the given streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        today: Optional[Datum] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.today = today if today is not None else Datum.today()
        self.medien: list[Medium] = []

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _line(self) -> str:
        text = self.stdin.readline()
        if not text:
            raise EOFError
        return text.rstrip("\r\n")

    def _char(self) -> str:
        while True:
            text = self._line().strip()
            if text:
                return text[0]

    def _number(self, signed: bool = False) -> int:
        while True:
            text = self._line().strip()
            if not text:
                continue
            token = text.split()[0]
            digits = token[1:] if signed and token[:1] in "+-" else token
            return int(token) if digits.isdigit() else 0

    def _find(self, medium_id: int) -> list[Medium]:
        return [medium for medium in self.medien if medium.id == medium_id]

    def fill_database(self) -> None:
        """Add the sample media."""
        out = self.stdout
        self.medien.extend(
            [
                Buch("Das Parfum", "Patrick Suskind", out),
                Buch("Harry Potter und der Stein der Weisen", "J. K. Rowling", out),
                Buch("Tom Sawyer", "Mark Twain", out),
                Magazin("Chip", Datum(1, 12, 2022), "Computer", out),
                DVD("Fluch der Karibik", 12, "Actionkomödie", out),
                Buch("Huckleberry Finn", "Mark Twain", out),
            ]
        )

    def add_medium(self) -> None:
        """Ask for the kind and data of a new medium and add it."""
        self._write(MEDIUM_MENU)
        choice = self._char()
        if choice == "1":
            self._write("Bitte geben Sie den Titel des Buchs ein: \n")
            titel = self._line()
            self._write("Bitte geben sie den Autor des Buchs ein: \n")
            autor = self._line()
            self.medien.append(Buch(titel, autor, self.stdout))
        elif choice == "2":
            self._write("Geben Sie den Titel des Magazins ein:\n")
            titel = self._line()
            self._write("Geben Sie die Sparte an:\n")
            sparte = self._line()
            self._write("Geben Sie das Erscheinungsdatum der Ausgabe an:\n")
            datum = read_date(self.stdin, self.stdout)
            self.medien.append(Magazin(titel, datum, sparte, self.stdout))
        elif choice == "3":
            self._write("Bitte geben Sie den Titel der DVD ein:\n")
            titel = self._line()
            self._write("Geben Sie das Genre an:\n")
            genre = self._line()
            self._write("Geben Sie die Altersfreigabe ein:\n")
            altersfreigabe = self._number(signed=True)
            self.medien.append(DVD(titel, altersfreigabe, genre, self.stdout))
        else:
            self._write("Ungültige Eingabe!\n")

    def remove_medium(self) -> None:
        """Ask for an ID and remove that medium."""
        self._write("Geben Sie die ID des Mediums ein, welches gelöscht werden soll: ")
        medium_id = self._number()
        matches = self._find(medium_id)
        if matches:
            self.medien.remove(matches[0])
        else:
            self._write("Keine gültige ID!\n")

    def lend_medium(self) -> None:
        """Ask for an ID and a borrower and lend the medium."""
        self._write("Geben Sie die ID des Mediums ein:\n")
        medium_id = self._number()
        self._write("Geben Sie den Namen der Person ein: ")
        name = self._line()
        self._write(
            "Geben Sie das Geburtsdatum der Person ein: (Format TT.MM.JJJJ) "
        )
        geburtsdatum = read_date(self.stdin, self.stdout)
        person = Person(name, geburtsdatum)
        matches = self._find(medium_id)
        for medium in matches:
            medium.ausleihen(person, self.today)
        if not matches:
            self._write("Keine gültige ID!\n")

    def return_medium(self) -> None:
        """Ask for an ID and take that medium back."""
        self._write("Geben Sie die ID des Mediums ein: ")
        medium_id = self._number()
        matches = self._find(medium_id)
        for medium in matches:
            medium.zurueckgeben()
        if not matches:
            self._write("Keine gültige ID!\n")

    def print_all(self) -> None:
        """Print every medium."""
        self._write("Vorhandene Medien in der Bücherei:\n")
        for medium in self.medien:
            self._write(f"{SEPARATOR}\n{medium.describe()}")

    def print_lent(self) -> None:
        """Print every medium that is currently lent."""
        self._write("Ausgeliehene Medien:\n")
        for medium in self.medien:
            if medium.ausgeliehen:
                self._write(f"{SEPARATOR}\n{medium.describe()}")

    def run(self) -> int:
        """Run the menu loop until the user quits or input ends."""
        self._write(f"Aktuelles Datum: {self.today}\n")
        actions = {
            "1": self.add_medium,
            "2": self.remove_medium,
            "3": self.print_all,
            "4": self.lend_medium,
            "5": self.return_medium,
            "6": self.print_lent,
        }
        try:
            while True:
                self._write(MENU)
                choice = self._char()
                if choice == "7":
                    self._write("Das Menü wird nun beendet.\n")
                    return 0
                action = actions.get(choice)
                if action is None:
                    self._write("Falsche Eingabe, bitte nochmal versuchen.")
                else:
                    action()
        except EOFError:
            return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run the library menu.")
    parser.parse_args(argv)
    library = Library(sys.stdin, sys.stdout)
    library.fill_database()
    return library.run()