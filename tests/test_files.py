import io

import pytest

from dfagen.enumerator import generate_automata
from dfagen.files import count_nonempty_lines, read_automata, write_automata
from dfagen.model import OutOfRange


def test_count_nonempty_lines():
    assert count_nonempty_lines(io.StringIO("a\n\n  \n b\n\t\nc")) == 3
    assert count_nonempty_lines(io.StringIO("")) == 0


def test_write_then_read(tmp_path):
    automata = generate_automata(3, 2)
    path = tmp_path / "sub" / "n3k2.txt"
    assert write_automata(path, automata) == 9
    assert read_automata(path, 3, 2) == automata


def test_read_skips_blank_lines(tmp_path, capsys):
    path = tmp_path / "a.txt"
    path.write_text("0 0 0 1\n\n   \n0 0 1 0\n")
    got = read_automata(path, 2, 2, verbose=True)
    assert [a.serialize() for a in got] == ["0 0 0 1", "0 0 1 0"]
    assert "Read 2 automata" in capsys.readouterr().out


def test_read_reports_line(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("0 0 0 1\n0 0 3 0\n")
    with pytest.raises(OutOfRange, match=":2:"):
        read_automata(path, 2, 2)
