# hoersaal

Small console programs and the building blocks behind them, as used in a
first programming course: a doubly linked list of students, a student
database that can be saved to and loaded from a text file, a lending library
with books, magazines and DVDs, and Dijkstra's shortest-path search over a
road map.

The programs talk to the user in German, as the course does.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Console programs

All three programs read from standard input and end with status 0 when the
user quits or the input runs out.

### Student list (`hoersaal-liste`)

```
hoersaal-liste
```

Keeps students in a doubly linked list. On start you are asked whether you
want to fill the list yourself (`j`); any other answer loads five sample
students. The menu then lets you add a student at the front or the back,
remove the first student, print the list forwards or backwards, delete a
student by matriculation number, and quit with `0`. A matriculation number
that is not a whole number is read as `0`.

### Student database (`hoersaal-studenten`)

```
hoersaal-studenten [--data-file PATH]
```

The same kind of menu, backed by an ordinary Python list, with a few more
entries: remove the last student, load students from a file (entry `8`,
reading `studenten.txt` unless `--data-file` names another), save them to a
file of your choice (entry `9`; pressing Enter picks
`longRandomStudents.txt`), and sort by matriculation number with `a`. If a
file cannot be opened the program ends with status 1.

The file format holds four lines per student:

```
34567
Harro Simoneit
19.06.1971
Am Markt 1
```

Lines ending in `\r\n` or `\r` are read as well as plain `\n`; blank lines
between records are skipped.

### Lending library (`hoersaal-buecherei`)

```
hoersaal-buecherei
```

Shows today's date and starts with a handful of books, a magazine and a DVD.
You can add and remove media by ID, list everything, lend a medium to a
person, take it back and list what is currently lent out. Rules apply when
lending:

- a medium that is already lent cannot be lent again;
- a DVD needs the borrower to be at least as old, in whole months, as its
  age rating in years times twelve;
- a magazine cannot be lent more than two months after it appeared.

Dates are entered as `TT.MM.JJJJ`, for example `19.06.1971`, with a year from
1000 to 2021; a wrong entry is reported and asked for again.

## Using the modules

```python
from hoersaal.student import Student
from hoersaal.linked_list import StudentList

students = StudentList()
students.push_back(Student(34567, "Harro Simoneit", "19.06.1971", "Am Markt 1"))
students.push_front(Student(12345, "Siggi Baumeister", "23.04.1983", "Ahornst.55"))

for student in students:
    print(student)
# Siggi Baumeister, MatNr. 12345, geb. am 23.04.1983, wohnhaft in Ahornst.55
# Harro Simoneit, MatNr. 34567, geb. am 19.06.1971, wohnhaft in Am Markt 1

node = students.search(34567)
students.remove(node)
```

`StudentList` also has `pop_front`, `pop_back`, `front`, `back`, `len()` and
`reversed()`; popping or peeking at an empty list raises `IndexError`.
Students compare, sort and hash by matriculation number.

Reading and writing the file format:

```python
from hoersaal.student_file import read_students, write_students

students = read_students("studenten.txt")
write_students(sorted(students), "sortiert.txt")
```

`parse_students(text)` and `format_students(students)` do the same on
strings.

Dates, people and media for the library:

```python
from hoersaal.datum import Datum
from hoersaal.person import Person
from hoersaal.medium import DVD

born = Datum.parse("19.06.1971")
print(born)                       # 19.06.1971
print(Datum(1, 1, 2020) - born)   # whole months between the dates

dvd = DVD("Fluch der Karibik", 12, "Actionkomödie")
dvd.ausleihen(Person("Vera Schmitt", born), Datum(1, 1, 2020))
print(dvd.describe())
```

`Datum.parse` raises `DateFormatError` for malformed or invalid dates. The
library menu itself is `hoersaal.buecherei.Library(stdin, stdout, today)`;
call `fill_database()` for the sample media and `run()` to start it.

Shortest paths:

```python
from hoersaal.dijkstra import RoadMap, search

road_map = RoadMap(
    cities={"Aachen": (-100, 100), "Köln": (0, 0), "Bonn": (0, 200)},
    streets=[("Aachen", "Köln"), ("Bonn", "Köln")],
)
print(search(road_map, "Aachen", "Bonn"))
# [('Aachen', 'Köln'), ('Bonn', 'Köln')]
```

A street's length is the straight-line distance between its cities.
`search` returns the streets from `start` to `target` in order, an empty list
when the two are not connected or are the same city, and raises `KeyError`
when either city is not on the map. `RoadMap` raises `ValueError` for a
street that names an unknown city.

## What is not included

Road maps are built in Python code only: there is no reader for map files
and no console command for route search. Everything is kept in memory; the
student database is the only part that saves to a file.