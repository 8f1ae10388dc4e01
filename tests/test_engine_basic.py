import pytest

from dfagen.engine import CanonicalEngine
from dfagen.enumerator import generate_automata
from dfagen.model import InvalidArity


def test_n2_k2_golden():
    got = [a.serialize() for a in generate_automata(2, 2)]
    assert got == ["0 0 0 1", "0 0 1 0"]


def test_single_sink_state():
    res = CanonicalEngine(1, 1).search()
    assert res["count"] == 1
    assert res["leaves"] == 1
    assert res["automata"][0].serialize() == "0"


def test_single_state_wider_alphabet():
    assert [a.serialize() for a in generate_automata(1, 3)] == ["0 0 0"]


@pytest.mark.parametrize("n,k", [(0, 2), (2, 0), (0, 0), (-1, 2)])
def test_invalid_arity(n, k):
    with pytest.raises(InvalidArity):
        generate_automata(n, k)


def test_invalid_arity_is_value_error():
    with pytest.raises(ValueError):
        CanonicalEngine(3, 0)


def test_leaves_counted_independently_of_acceptance():
    res = CanonicalEngine(2, 2).search()
    # (0,0) is a complete assignment that never discovers state 1
    assert res["leaves"] == 3
    assert res["count"] == 2


def test_root_discovered_mode():
    got = [a.serialize() for a in generate_automata(2, 2, root_discovered=True)]
    assert got == ["0 0 0 0", "0 0 0 1", "0 0 1 0"]
    assert generate_automata(1, 1, root_discovered=True) == []
