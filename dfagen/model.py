from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

State = int
Symbol = int
Timing = Tuple[str, float]  # (algorithm name, elapsed seconds)


# ---------- errors ----------
class DfagenError(Exception):
    pass


class InvalidArity(DfagenError, ValueError):
    """n or k is not a positive integer."""


class EncodingError(DfagenError, ValueError):
    def __init__(self, message: str, index: int = -1):
        super().__init__(message)
        self.index = index


class MalformedCount(EncodingError):
    pass


class OutOfRange(EncodingError):
    pass


class ConfigParseError(DfagenError):
    pass


class GenerationError(AssertionError):
    """Raised when an automaton produced by the engine fails its own self-check."""


def check_arity(n, k) -> None:
    for name, v in (("n", n), ("k", k)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidArity(f"{name} must be an int, got {type(v).__name__}")
    if n < 1 or k < 1:
        raise InvalidArity(f"n and k must be > 0 (got n={n}, k={k})")


# ---------- automaton encoding ----------
@dataclass(frozen=True)
class EncodedAutomaton:
    n: int
    k: int
    transitions: Tuple[State, ...]   # state-major, symbol-minor

    def target(self, state: State, symbol: Symbol) -> State:
        return self.transitions[state * self.k + symbol]

    def rows(self) -> Tuple[Tuple[State, ...], ...]:
        k = self.k
        return tuple(self.transitions[i:i + k] for i in range(0, len(self.transitions), k))

    def serialize(self) -> str:
        return " ".join(str(t) for t in self.transitions)

    def __str__(self) -> str:
        return self.serialize()

    def validate(self) -> None:
        """
        Round-trip self-check: re-tokenize the serialized text and make sure
        it holds exactly n*k integers in [0, n-1].
        """
        _check_tokens(self.serialize().split(), self.n, self.k)

    def to_array(self) -> np.ndarray:
        return np.array(self.transitions, dtype=np.int64).reshape(self.n, self.k)

    @staticmethod
    def parse(text: str, n: int, k: int) -> "EncodedAutomaton":
        check_arity(n, k)
        values = _check_tokens(text.split(), n, k)
        return EncodedAutomaton(n, k, tuple(values))

    @staticmethod
    def from_rows(rows: Iterable[Sequence[int]]) -> "EncodedAutomaton":
        rows = [tuple(int(x) for x in r) for r in rows]
        n = len(rows)
        k = len(rows[0]) if rows else 0
        check_arity(n, k)
        if any(len(r) != k for r in rows):
            raise MalformedCount(f"all rows must have {k} entries")
        a = EncodedAutomaton(n, k, tuple(t for r in rows for t in r))
        a.validate()
        return a


def _check_tokens(tokens: Sequence[str], n: int, k: int) -> list:
    if len(tokens) != n * k:
        raise MalformedCount(
            f"Expected {n * k} integers, found {len(tokens)}",
            index=min(len(tokens), n * k),
        )
    values = []
    for i, tok in enumerate(tokens):
        try:
            cur = int(tok)
        except ValueError:
            raise OutOfRange(f"Expected integer in range [0, {n - 1}], found {tok!r}", index=i) from None
        if not 0 <= cur < n:
            raise OutOfRange(f"Expected integer in range [0, {n - 1}], found {cur}", index=i)
        values.append(cur)
    return values


# ---------- analysis result ----------
@dataclass(frozen=True)
class AlgoResult:
    non_synchro: bool = False
    mlsw_lower_bound: int = 0
    mlsw_upper_bound: int = 0
    word: Optional[Tuple[Symbol, ...]] = None
    algorithms_run: Tuple[Timing, ...] = field(default_factory=tuple)

    @staticmethod
    def bounded(lower: int, upper: int, algorithms_run: Iterable[Timing] = (),
                word: Optional[Iterable[Symbol]] = None) -> "AlgoResult":
        return AlgoResult(
            non_synchro=False,
            mlsw_lower_bound=lower,
            mlsw_upper_bound=upper,
            word=tuple(word) if word is not None else None,
            algorithms_run=tuple(algorithms_run),
        )

    @staticmethod
    def not_synchronizing(algorithms_run: Iterable[Timing] = ()) -> "AlgoResult":
        return AlgoResult(non_synchro=True, algorithms_run=tuple(algorithms_run))
