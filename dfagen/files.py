from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, TextIO, Union

from .model import EncodedAutomaton, EncodingError

PathLike = Union[str, Path]


def count_nonempty_lines(stream: TextIO) -> int:
    """Number of lines holding at least one non-whitespace character."""
    return sum(1 for line in stream if line.strip())


def write_automata(path: PathLike, automata: Iterable[EncodedAutomaton]) -> int:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with path.open("w", encoding="utf-8", newline="\n") as f:
        for a in automata:
            f.write(a.serialize() + "\n")
            written += 1
    return written


def read_automata(path: PathLike, n: int, k: int, verbose: bool = False) -> List[EncodedAutomaton]:
    """
    Load one encoding per non-empty line. A malformed line raises the
    matching EncodingError with the 1-based line number in its message.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        expected = count_nonempty_lines(f)
        f.seek(0)
        out: List[EncodedAutomaton] = []
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                out.append(EncodedAutomaton.parse(line, n, k))
            except EncodingError as e:
                raise type(e)(f"{path}:{lineno}: {e}", index=e.index) from e

    if verbose:
        print(f"[info] Read {len(out)} automata from {path}", flush=True)
    assert len(out) == expected
    return out
