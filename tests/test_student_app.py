import io

from hoersaal.list_app import demo_students
from hoersaal.student import Student
from hoersaal.student_app import run
from hoersaal.student_file import read_students, write_students


def _run(text, data_file="unused.txt"):
    out = io.StringIO()
    status = run(io.StringIO(text), out, data_file)
    return status, out.getvalue()


def _positions(output, students):
    return [output.index(str(s)) for s in students]


def test_quit_returns_zero():
    status, output = _run("n\n0\n")
    assert status == 0
    assert output.endswith("Das Programm wird nun beendet")


def test_end_of_input_returns_zero():
    status, output = _run("n\n")
    assert status == 0
    assert "Menue:" in output


def test_print_forward_in_order():
    _, output = _run("n\n5\n0\n")
    body = output.split("Inhalt der Liste in fortlaufender Reihenfolge:\n")[1]
    positions = _positions(body, demo_students())
    assert positions == sorted(positions)


def test_print_backward_in_reverse_order():
    _, output = _run("n\n6\n0\n")
    body = output.split("Inhalt der Liste in umgekehrter Reihenfolge:\n")[1]
    positions = _positions(body, demo_students())
    assert positions == sorted(positions, reverse=True)


def test_empty_list_messages():
    _, output = _run("j\n3\n4\n5\n0\n")
    assert output.count("Die Liste ist leer!") == 3


def test_remove_front_and_back():
    first, *_, last = demo_students()
    _, output = _run("n\n3\n4\n5\n0\n")
    assert f"Der folgende Student ist geloescht worden:\n{first}\n" in output
    assert f"Der folgende Student wird geloescht:\n{last}\n" in output
    listing = output.split("Inhalt der Liste in fortlaufender Reihenfolge:\n")[1]
    assert str(first) not in listing
    assert str(last) not in listing


def test_add_front_and_back(tmp_path):
    path = tmp_path / "out.txt"
    text = (
        "j\n"
        "2\nBerta\n1.1.2000\nWeg 2\n2\n"
        "1\nAnton\n2.2.2001\nWeg 1\n1\n"
        f"9\n{path}\n0\n"
    )
    status, _ = _run(text)
    assert status == 0
    saved = read_students(path)
    assert [(s.mat_nr, s.name) for s in saved] == [(1, "Anton"), (2, "Berta")]


def test_delete_by_number_found():
    target = demo_students()[2]
    _, output = _run(f"n\n7\n{target.mat_nr}\n5\n0\n")
    assert f"Der folgende Student wird geloescht:\n{target}\n" in output
    listing = output.split("Inhalt der Liste in fortlaufender Reihenfolge:\n")[1]
    assert str(target) not in listing


def test_delete_by_number_missing():
    _, output = _run("n\n7\n99999\n0\n")
    assert "Es wurde kein Student mit der Matrikelnummer 99999 gefunden.\n" in output


def test_sort_by_number():
    _, output = _run("n\na\n5\n0\n")
    body = output.split("Inhalt der Liste in fortlaufender Reihenfolge:\n")[1]
    ordered = sorted(demo_students(), key=lambda s: s.mat_nr)
    positions = _positions(body, ordered)
    assert positions == sorted(positions)


def test_load_from_file(tmp_path):
    path = tmp_path / "studenten.txt"
    extra = [Student(5, "Eva", "3.3.2003", "Platz 5")]
    write_students(extra, path)
    status, output = _run("j\n8\n5\n0\n", data_file=path)
    assert status == 0
    assert f"{extra[0]}\n" in output


def test_load_missing_file_fails(tmp_path):
    status, output = _run("j\n8\n0\n", data_file=tmp_path / "fehlt.txt")
    assert status == 1
    assert "Die Datei konnte nicht geoeffnet werden.\n" in output
    assert "Das Programm wird nun beendet" not in output


def test_save_demo_round_trip(tmp_path):
    path = tmp_path / "saved.txt"
    status, _ = _run(f"n\n9\n{path}\n0\n")
    assert status == 0
    saved = read_students(path)
    expected = demo_students()
    assert [(s.mat_nr, s.name, s.geburtstag, s.adresse) for s in saved] == [
        (s.mat_nr, s.name, s.geburtstag, s.adresse) for s in expected
    ]


def test_save_empty_list():
    _, output = _run("j\n9\n0\n")
    assert "Es sind keine Daten vorhanden, die abgespeichert werden könnten.\n" in output


def test_save_to_unwritable_path(tmp_path):
    status, output = _run(f"n\n9\n{tmp_path / 'nope' / 'x.txt'}\n0\n")
    assert status == 1
    assert " Fehler beim oeffnen der Datei !" in output


def test_wrong_choice():
    _, output = _run("n\nx\n0\n")
    assert "Falsche Eingabe, bitte nochmal" in output