from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Tuple
from .engine import CanonicalEngine
from .model import EncodedAutomaton


def _run(n: int, k: int, root_discovered: bool = False, verbose: bool = False) -> Dict:
    return CanonicalEngine(n, k, root_discovered=root_discovered).search(verbose=verbose)


def generate_automata(n: int, k: int, root_discovered: bool = False,
                      verbose: bool = False) -> List[EncodedAutomaton]:
    """All canonical automata with n states over k letters, in discovery order."""
    return _run(n, k, root_discovered, verbose)["automata"]


def iter_automata(n: int, k: int, root_discovered: bool = False) -> Iterator[EncodedAutomaton]:
    return CanonicalEngine(n, k, root_discovered=root_discovered).iter_automata()


def count_automata(n: int, k: int, root_discovered: bool = False) -> int:
    return sum(1 for _ in iter_automata(n, k, root_discovered))


def table_counts(ns: Iterable[int], ks: Iterable[int] = (2,),
                 root_discovered: bool = False) -> Dict[Tuple[int, int], int]:
    """{(n, k): count} over the grid ns x ks."""
    ks = list(ks)
    return {(n, k): count_automata(n, k, root_discovered) for n in ns for k in ks}
