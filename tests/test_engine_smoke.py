import itertools

import pytest

from dfagen.canonical import canonical_key, discovery_trace, has_backward_edges, is_discovery_ordered
from dfagen.engine import CanonicalEngine
from dfagen.enumerator import generate_automata, iter_automata
from dfagen.model import EncodedAutomaton

GRID = [(n, k) for n in range(1, 5) for k in range(1, 4) if n ** k <= 4 ** 3]


@pytest.mark.parametrize("n,k", GRID)
def test_properties(n, k):
    automata = generate_automata(n, k)
    encodings = [a.serialize() for a in automata]
    assert len(set(encodings)) == len(encodings)

    for a in automata:
        assert (a.n, a.k) == (n, k)
        assert all(a.target(0, s) == 0 for s in range(k))
        assert has_backward_edges(a)
        assert is_discovery_ordered(a)
        assert discovery_trace(a)[-1:] in ([n], [])
        assert canonical_key(a) == a.rows()
        a.validate()
        assert EncodedAutomaton.parse(a.serialize(), n, k) == a


@pytest.mark.parametrize("n,k", [(3, 2), (2, 3)])
def test_lazy_matches_eager(n, k):
    assert list(iter_automata(n, k)) == generate_automata(n, k)


def test_deterministic_order():
    assert generate_automata(3, 2) == generate_automata(3, 2)


def test_matches_brute_force_filter():
    # every table meeting the constraints, and nothing else, is produced
    n, k = 3, 2
    expected = set()
    for cells in itertools.product(range(n), repeat=(n - 1) * k):
        rows = [tuple([0] * k)] + [tuple(cells[i:i + k]) for i in range(0, len(cells), k)]
        if has_backward_edges(rows) and is_discovery_ordered(rows):
            expected.add(rows_to_str(rows))
    got = {a.serialize() for a in generate_automata(n, k)}
    assert got == expected


def rows_to_str(rows):
    return " ".join(str(t) for row in rows for t in row)


def test_engine_reusable():
    eng = CanonicalEngine(3, 2)
    first = eng.search()
    second = eng.search()
    assert first["automata"] == second["automata"]
    assert first["leaves"] == second["leaves"]


def test_verbose_search_prints(capsys):
    CanonicalEngine(2, 2).search(verbose=True)
    out = capsys.readouterr().out
    assert "[engine]" in out
    assert "read 2 automata" in out
