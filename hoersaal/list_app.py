"""Interactive menu for managing students in a linked list."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from hoersaal.linked_list import StudentList
from hoersaal.student import Student

MENU = (
    "\nMenue:\n"
    "-----------------------------\n"
    "(1): Datenelement vorne hinzufuegen\n"
    "(2): Datenelement hinten hinzufuegen\n"
    "(3): Datenelement vorne entfernen\n"
    "(4): Datenbank ausgeben\n"
    "(5): Datenbank in umgekehrter Reihenfolge ausgeben\n"
    "(6): Datenelement löschen\n"
    "(0): Beenden\n"
)


def demo_students() -> list[Student]:
    """Return the sample students used to pre-fill the list."""
    return [
        Student(34567, "Harro Simoneit", "19.06.1971", "Am Markt 1"),
        Student(74567, "Vera Schmitt", "23.07.1982", "Gartenstr. 23"),
        Student(12345, "Siggi Baumeister", "23.04.1983", "Ahornst.55"),
        Student(64567, "Paula Peters", "9.01.1981", "Weidenweg 12"),
        Student(23456, "Walter Rodenstock", "15.10.1963", "Wöllnerstr.9"),
    ]


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


def _print_all(console: _Console, students, heading: str) -> None:
    console.write(heading + "\n")
    for student in students:
        console.write(f"{student}\n")


def _session(console: _Console) -> None:
    students = StudentList()
    console.write("Wollen Sie die Liste selbst fuellen? (j)/(n) ")
    if console.char() != "j":
        for student in demo_students():
            students.push_back(student)

    while True:
        console.write(MENU)
        choice = console.char()
        if choice == "1":
            students.push_front(_read_student(console))
        elif choice == "2":
            students.push_back(_read_student(console))
        elif choice == "3":
            if students:
                console.write("Der folgende Student ist geloescht worden:\n")
                console.write(f"{students.pop_front()}\n")
            else:
                console.write("Die Liste ist leer!\n")
        elif choice == "4":
            if students:
                _print_all(
                    console, students, "Inhalt der Liste in fortlaufender Reihenfolge:"
                )
            else:
                console.write("Die Liste ist leer!\n\n")
        elif choice == "5":
            if students:
                _print_all(
                    console,
                    reversed(students),
                    "Inhalt der Liste in umgekehrter Reihenfolge:",
                )
            else:
                console.write("Die Liste ist leer!\n\n")
        elif choice == "6":
            console.write(
                "Bitte geben sie die Matrikelnummer des Studenten ein, "
                "den sie loeschen moechten: "
            )
            mat_nr = console.number()
            node = students.search(mat_nr)
            if node is not None:
                console.write("Der folgende Student wird geloescht :\n")
                console.write(f"{node.student}\n")
                students.remove(node)
            else:
                console.write(
                    f"Der Student mit der Matrikelnummer {mat_nr} "
                    "ist nicht in der Liste enthalten.\n"
                )
        elif choice == "0":
            console.write("Das Programm wird nun beendet")
            return
        else:
            console.write("Falsche Eingabe, bitte nochmal")


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user quits or input ends."""
    try:
        _session(_Console(stdin, stdout))
    except EOFError:
        pass
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Manage a list of students interactively."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)