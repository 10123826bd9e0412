"""Interactive menu for managing students in a Python list, with file I/O."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence, TextIO, Union

from hoersaal.list_app import demo_students
from hoersaal.student import Student
from hoersaal.student_file import read_students, write_students

DEFAULT_DATA_FILE = "studenten.txt"
DEFAULT_OUTPUT_FILE = "longRandomStudents.txt"

MENU = (
    "\nMenue:\n"
    "-----------------------------\n"
    "(1): Datenelement vorne hinzufuegen\n"
    "(2): Datenelement hinten hinzufuegen\n"
    "(3): Datenelement vorne löschen\n"
    "(4): Datenelement hinten löschen\n"
    "(5): Datenbank ausgeben\n"
    "(6): Datenbank in umgekehrter Reihenfolge ausgeben\n"
    "(7): Datenelement löschen\n"
    "(8): Datenelemente aus Datei einlesen\n"
    "(9): Daten in eine Datei speichern\n"
    "(0): Beenden\n"
)


class _Abort(Exception):
    """Raised when the session must end with a failure status."""


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def line(self) -> str:
        text = self.stdin.readline()
        if not text:
            raise EOFError
        return text.rstrip("\r\n")

    def char(self) -> str:
        while True:
            text = self.line().strip()
            if text:
                return text[0]

    def number(self) -> int:
        while True:
            text = self.line().strip()
            if text:
                token = text.split()[0]
                return int(token) if token.isdigit() else 0


def _read_student(console: _Console) -> Student:
    console.write("Bitte geben sie die Daten für den Studenten ein.\nName: ")
    name = console.line()
    console.write("Geburtsdatum: ")
    geburtstag = console.line()
    console.write("Adresse: ")
    adresse = console.line()
    console.write("Matrikelnummer: ")
    mat_nr = console.number()
    return Student(mat_nr, name, geburtstag, adresse)


def _delete_by_number(console: _Console, students: list[Student]) -> None:
    console.write(
        "Bitte geben sie die Matrikelnummer des Studenten ein, "
        "den sie loeschen moechten: "
    )
    mat_nr = console.number()
    index = next(
        (i for i, student in enumerate(students) if student.mat_nr == mat_nr), None
    )
    if index is None:
        console.write(
            f"Es wurde kein Student mit der Matrikelnummer {mat_nr} gefunden.\n"
        )
        return
    console.write("Der folgende Student wird geloescht:\n")
    console.write(f"{students.pop(index)}\n")


def _load(console: _Console, students: list[Student], data_file) -> None:
    console.write("Bitte geben sie den Dateinamen ein: ")
    try:
        loaded = read_students(data_file)
    except OSError:
        console.write("Die Datei konnte nicht geoeffnet werden.\n")
        raise _Abort from None
    students.extend(loaded)


def _save(console: _Console, students: list[Student]) -> None:
    if not students:
        console.write(
            "Es sind keine Daten vorhanden, die abgespeichert werden könnten.\n"
        )
        return
    console.write(
        f"Geben sie nun Bitte den Dateinamen an. (ENTER für '{DEFAULT_OUTPUT_FILE})'"
    )
    filename = console.line() or DEFAULT_OUTPUT_FILE
    try:
        write_students(students, filename)
    except OSError:
        console.write(" Fehler beim oeffnen der Datei !")
        raise _Abort from None


def _session(console: _Console, data_file) -> None:
    students: list[Student] = []
    console.write("Wollen Sie die Liste selbst fuellen? (j)/(n) ")
    if console.char() != "j":
        students.extend(demo_students())

    while True:
        console.write(MENU)
        choice = console.char()
        if choice == "1":
            students.insert(0, _read_student(console))
        elif choice == "2":
            students.append(_read_student(console))
        elif choice == "3":
            if students:
                console.write("Der folgende Student ist geloescht worden:\n")
                console.write(f"{students.pop(0)}\n")
            else:
                console.write("Die Liste ist leer!\n")
        elif choice == "4":
            if students:
                console.write("Der folgende Student wird geloescht:\n")
                console.write(f"{students.pop()}\n")
            else:
                console.write("Die Liste ist leer!\n")
        elif choice in ("5", "6"):
            if students:
                if choice == "5":
                    console.write("Inhalt der Liste in fortlaufender Reihenfolge:\n")
                    ordered = students
                else:
                    console.write("Inhalt der Liste in umgekehrter Reihenfolge:\n")
                    ordered = list(reversed(students))
                for student in ordered:
                    console.write(f"{student}\n")
            else:
                console.write("Die Liste ist leer!\n\n")
        elif choice == "7":
            _delete_by_number(console, students)
        elif choice == "8":
            _load(console, students, data_file)
        elif choice == "9":
            _save(console, students)
        elif choice == "a":
            console.write("Sortieren der Liste nach Matrikelnummer\n")
            students.sort()
        elif choice == "0":
            console.write("Das Programm wird nun beendet")
            return
        else:
            console.write("Falsche Eingabe, bitte nochmal")


def run(
    stdin: TextIO,
    stdout: TextIO,
    data_file: Union[str, "os.PathLike[str]"] = DEFAULT_DATA_FILE,
) -> int:
    """Run the menu loop; return 1 if a file could not be opened, else 0."""
    try:
        _session(_Console(stdin, stdout), data_file)
    except EOFError:
        pass
    except _Abort:
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Manage a list of students interactively."
    )
    parser.add_argument(
        "--data-file",
        default=DEFAULT_DATA_FILE,
        help="file read by menu entry 8 (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, args.data_file)