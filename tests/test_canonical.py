import pytest

from dfagen.canonical import canonical_key, discovery_trace, has_backward_edges, is_discovery_ordered
from dfagen.model import EncodedAutomaton


def test_canonical_key_accepts_rows_and_automaton():
    a = EncodedAutomaton.parse("0 0 0 1", 2, 2)
    assert canonical_key(a) == canonical_key([[0, 0], [0, 1]]) == ((0, 0), (0, 1))


def test_canonical_key_relabels_by_first_appearance():
    # state 2 is referenced before state 1
    assert canonical_key([[0, 0], [0, 2], [1, 0]]) == ((0, 0), (2, 0), (0, 1))
    assert canonical_key([[0, 0], [2, 0], [0, 1]]) == ((0, 0), (0, 2), (1, 0))


def test_canonical_key_rejects_other_types():
    with pytest.raises(TypeError):
        canonical_key("0 0 0 1")


def test_discovery_trace():
    assert discovery_trace([[0, 0], [1, 0]]) == [2, 2]
    assert discovery_trace([[0, 0], [0, 0]]) == [1, 1]
    assert discovery_trace([[0, 0], [0, 0]], root_discovered=True) == [2, 2]


def test_discovery_trace_skip_ahead():
    with pytest.raises(ValueError):
        discovery_trace([[0, 0], [2, 0], [1, 0]])


def test_is_discovery_ordered():
    assert is_discovery_ordered([[0, 0], [0, 1]])
    assert not is_discovery_ordered([[0, 0], [0, 0]])
    assert not is_discovery_ordered([[0, 1], [0, 1]])
    assert is_discovery_ordered([[0, 0], [0, 0]], root_discovered=True)


def test_has_backward_edges():
    assert has_backward_edges([[0, 0], [1, 0]])
    assert not has_backward_edges([[0, 0], [1, 1]])
    assert has_backward_edges([[0]])
