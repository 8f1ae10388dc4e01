"""
Result sink for per-automaton analysis results.

  • SummaryOnly       — no detailed output, only notices and the run summary
  • StreamDestination — one line per result written to an open text stream
  • FileDestination   — same, to a file the destination opens and closes

Pushes must come from a single writer; the running maxima and the
destination are updated without locking.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, TextIO, Tuple, Union

from .model import AlgoResult


# ---------- destinations ----------
class SummaryOnly:
    detailed = False

    def write_line(self, line: str) -> None:
        pass

    def close(self) -> None:
        pass


class StreamDestination:
    detailed = True

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write_line(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()

    def close(self) -> None:
        # stream belongs to the caller
        pass


class FileDestination(StreamDestination):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(self.path.open("w", encoding="utf-8"))

    def close(self) -> None:
        if not self.stream.closed:
            self.stream.close()

    def __enter__(self) -> "FileDestination":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


Destination = Union[SummaryOnly, StreamDestination]


# ---------- formatting ----------
def format_result(result: AlgoResult, index: int) -> str:
    """Detailed-output line, e.g. `3: [2, 4] ((Eppstein, 0.01)) {0 1 1}`."""
    if result.non_synchro:
        return f"{index}: NON SYNCHRO"

    algos = ", ".join(f"({name}, {elapsed:g})" for name, elapsed in result.algorithms_run)
    line = f"{index}: [{result.mlsw_lower_bound}, {result.mlsw_upper_bound}] ({algos})"
    if result.word is not None:
        line += " {" + " ".join(str(s) for s in result.word) + "}"
    return line


# ---------- sink ----------
class ResultSink:
    def __init__(self, destination: Optional[Destination] = None):
        self.destination: Destination = destination if destination is not None else SummaryOnly()
        self.min_max = 0
        self.max_max = 0
        self.pushed = 0
        self.non_synchro = 0

    def set_output(self, destination: Destination) -> None:
        self.destination = destination

    def push_result(self, result: AlgoResult, index: int) -> None:
        self.pushed += 1
        if result.non_synchro:
            self.non_synchro += 1
        else:
            self.min_max = max(self.min_max, result.mlsw_lower_bound)
            self.max_max = max(self.max_max, result.mlsw_upper_bound)

        if not self.destination.detailed:
            if result.word is not None:
                print(f"[info] Found synchronizing word of length {len(result.word)} "
                      f"(use the -o flag to save it)", flush=True)
            return

        if result.word is not None and not result.non_synchro:
            print(f"[info] Saving synchronizing word of length {len(result.word)}", flush=True)
        self.destination.write_line(format_result(result, index))

    def summary(self) -> Tuple[int, int]:
        return self.min_max, self.max_max

    def print_result(self) -> str:
        line = f"[{self.min_max}, {self.max_max}]"
        print(line, flush=True)
        return line

    def close(self) -> None:
        self.destination.close()
