from __future__ import annotations

from typing import Dict, Iterator, List
import time

from .model import EncodedAutomaton, EncodingError, GenerationError, check_arity

UNSET = -1


class _Search:
    """
    Working state of one enumeration: the transition table being filled,
    plus counters. Each call to CanonicalEngine.iter_automata owns a fresh one.
    """

    __slots__ = ("n", "k", "table", "leaves", "accepted")

    def __init__(self, n: int, k: int):
        self.n = n
        self.k = k
        self.table: List[List[int]] = [[UNSET] * k for _ in range(n)]
        self.leaves = 0
        self.accepted = 0

    def descend(self, state: int, sym: int, seen: int) -> Iterator[EncodedAutomaton]:
        n, k = self.n, self.k

        # all rows decided
        if state == n:
            self.leaves += 1
            if seen == n:
                self.accepted += 1
                yield self._freeze()
            return

        if sym == k:
            yield from self.descend(state + 1, 0, seen)
            return

        row = self.table[state]
        upper = min(seen, n - 1)

        # last symbol of a row with no downward edge yet: only downward targets remain
        if sym == k - 1 and not any(0 <= t < state for t in row[:sym]):
            upper = min(state - 1, seen)

        for target in range(upper + 1):
            row[sym] = target
            discovered = 1 if (target == seen and seen < n) else 0
            yield from self.descend(state, sym + 1, seen + discovered)

        row[sym] = UNSET

    def _freeze(self) -> EncodedAutomaton:
        a = EncodedAutomaton(self.n, self.k, tuple(t for row in self.table for t in row))
        try:
            a.validate()
        except EncodingError as e:
            state, sym = divmod(max(e.index, 0), self.k)
            raise GenerationError(
                f"generated automaton failed validation (n={self.n}, k={self.k}, "
                f"cell=({state}, {sym})): {e} [{a.serialize()}]"
            ) from e
        return a


class CanonicalEngine:
    """Enumerate sink-rooted DFAs in discovery-order canonical form."""

    def __init__(self, n: int, k: int, root_discovered: bool = False):
        check_arity(n, k)
        self.n = n
        self.k = k
        # True: filling the sink row also marks state 1 as discovered, so the
        # non-sink part is an (n-1)-state automaton rooted at state 1.
        self.root_discovered = root_discovered
        self.leaves = 0

    def iter_automata(self) -> Iterator[EncodedAutomaton]:
        search = _Search(self.n, self.k)
        for s in range(self.k):
            search.table[0][s] = 0
        seen = 2 if self.root_discovered else 1
        yield from search.descend(1, 0, seen)
        self.leaves = search.leaves

    def search(self, verbose: bool = False) -> Dict:
        t0 = time.perf_counter()
        automata = list(self.iter_automata())
        elapsed = time.perf_counter() - t0

        if verbose:
            print(f"[engine] n={self.n} k={self.k}  read {len(automata)} automata", flush=True)
            print(f"[engine] leaves visited: {self.leaves}", flush=True)
            print(f"[engine] total runtime: {elapsed:.6f}s", flush=True)

        return {
            "automata": automata,
            "count": len(automata),
            "leaves": self.leaves,
            "elapsed": elapsed,
        }
