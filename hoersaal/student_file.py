"""Reading and writing student records in the plain-text exchange format.

Each record takes four lines: matriculation number, name, birthday and
address. Line endings may be LF, CRLF or CR.
"""

from __future__ import annotations

import os
from typing import Iterable, Union

from hoersaal.student import Student

PathLike = Union[str, "os.PathLike[str]"]


def parse_students(text: str) -> list[Student]:
    """Parse student records from ``text``.

    Blank lines before a matriculation number are skipped. A trailing
    record with missing lines gets empty strings for them. A number line
    that is not a non-negative integer raises :class:`ValueError`.
    """
    lines = iter(text.splitlines())
    students: list[Student] = []
    for line in lines:
        token = line.strip()
        if not token:
            continue
        if not token.isdigit():
            raise ValueError(f"invalid matriculation number: {token!r}")
        name, geburtstag, adresse = (
            next(lines, "").replace("\r", "") for _ in range(3)
        )
        students.append(Student(int(token), name, geburtstag, adresse))
    return students


def read_students(path: PathLike) -> list[Student]:
    """Read student records from the file at ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_students(handle.read())


def format_students(students: Iterable[Student]) -> str:
    """Render students in the four-lines-per-record format."""
    return "".join(
        f"{s.mat_nr}\n{s.name}\n{s.geburtstag}\n{s.adresse}\n" for s in students
    )


def write_students(students: Iterable[Student], path: PathLike) -> None:
    """Write students to the file at ``path``, replacing its contents."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(format_students(students))