from __future__ import annotations
from typing import Iterable, Optional, Protocol, Sequence

from tqdm import tqdm

from .model import AlgoResult, EncodedAutomaton
from .sink import ResultSink


class Analyzer(Protocol):
    """Synchronizing-word bound computation, supplied by the caller."""

    def __call__(self, automaton: EncodedAutomaton) -> AlgoResult: ...


def run_pipeline(
    automata: Iterable[EncodedAutomaton],
    analyze: Analyzer,
    sink: Optional[ResultSink] = None,
    progress: bool = True,
    desc: str = "analyze",
) -> ResultSink:
    """
    Hand every automaton to `analyze` and push the result to `sink`,
    indices starting at 0. Results are pushed one at a time, in order.
    """
    sink = sink if sink is not None else ResultSink()
    total = len(automata) if isinstance(automata, Sequence) else None
    for index, a in enumerate(tqdm(automata, total=total, desc=desc, disable=not progress)):
        sink.push_result(analyze(a), index)
    return sink
