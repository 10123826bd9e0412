import io

from hoersaal.list_app import demo_students, run


def _run(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def test_demo_students():
    students = demo_students()
    assert [s.mat_nr for s in students] == [34567, 74567, 12345, 64567, 23456]
    assert students[-1].adresse == "Wöllnerstr.9"


def test_print_demo_forward_and_backward():
    code, out = _run("n\n4\n5\n0\n")
    assert code == 0
    lines = [str(s) for s in demo_students()]
    forward = out.index("Inhalt der Liste in fortlaufender Reihenfolge:")
    backward = out.index("Inhalt der Liste in umgekehrter Reihenfolge:")
    fwd_positions = [out.index(line, forward) for line in lines]
    assert fwd_positions == sorted(fwd_positions)
    bwd_positions = [out.index(line, backward) for line in lines]
    assert bwd_positions == sorted(bwd_positions, reverse=True)
    assert out.endswith("Das Programm wird nun beendet")


def test_empty_list_messages():
    _, out = _run("j\n3\n4\n0\n")
    assert "Die Liste ist leer!\n" in out
    assert "Die Liste ist leer!\n\n" in out
    assert "Harro Simoneit" not in out


def test_add_front_and_back():
    text = (
        "j\n"
        "2\nVera Schmitt\n23.07.1982\nGartenstr. 23\n74567\n"
        "1\nHarro Simoneit\n19.06.1971\nAm Markt 1\n34567\n"
        "4\n0\n"
    )
    _, out = _run(text)
    demo = demo_students()
    first = out.index(str(demo[0]))
    second = out.index(str(demo[1]))
    assert first < second


def test_remove_front():
    _, out = _run("n\n3\n4\n0\n")
    first = str(demo_students()[0])
    assert f"Der folgende Student ist geloescht worden:\n{first}\n" in out
    listing = out[out.index("Inhalt der Liste in fortlaufender Reihenfolge:"):]
    assert first not in listing


def test_delete_by_mat_nr():
    _, out = _run("n\n6\n12345\n4\n0\n")
    target = str(demo_students()[2])
    assert f"Der folgende Student wird geloescht :\n{target}\n" in out
    listing = out[out.index("Inhalt der Liste in fortlaufender Reihenfolge:"):]
    assert target not in listing
    assert str(demo_students()[3]) in listing


def test_delete_missing():
    _, out = _run("n\n6\n99999\n0\n")
    assert (
        "Der Student mit der Matrikelnummer 99999 ist nicht in der Liste enthalten.\n"
        in out
    )


def test_invalid_choice_and_eof():
    code, out = _run("n\nx\n")
    assert code == 0
    assert "Falsche Eingabe, bitte nochmal" in out
    assert "Das Programm wird nun beendet" not in out