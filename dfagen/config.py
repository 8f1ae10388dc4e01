from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

from .model import ConfigParseError, check_arity


def read_config(path: Union[str, Path], verbose: bool = False) -> Dict[str, Any]:
    """Load the JSON run configuration; any parse failure becomes ConfigParseError."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            cfg = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"{path}: {e}") from e
    except OSError as e:
        raise ConfigParseError(f"{path}: cannot read config ({e})") from e

    if not isinstance(cfg, dict):
        raise ConfigParseError(f"{path}: top level must be an object, got {type(cfg).__name__}")

    if verbose:
        print("[info] Config:\n" + json.dumps(cfg, indent=4), flush=True)
    return cfg


@dataclass
class RunConfig:
    n: int = 4
    k: int = 2
    output: Optional[str] = None          # detailed per-automaton results
    automata_file: Optional[str] = None   # encodings, one per line
    root_discovered: bool = False
    verbose: bool = False

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RunConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ConfigParseError(f"unknown config keys: {sorted(unknown)}")
        cfg = cls(**d)
        cfg.check()
        return cfg

    @classmethod
    def load(cls, path: Union[str, Path], verbose: bool = False) -> "RunConfig":
        return cls.from_dict(read_config(path, verbose=verbose))

    def check(self) -> None:
        check_arity(self.n, self.k)
        for name in ("root_discovered", "verbose"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigParseError(f"{name} must be a boolean")
        for name in ("output", "automata_file"):
            v = getattr(self, name)
            if v is not None and not isinstance(v, str):
                raise ConfigParseError(f"{name} must be a path string")
