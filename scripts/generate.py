# scripts/generate.py
from __future__ import annotations

import argparse
import importlib
import json
import pathlib
import sys
import time
from datetime import datetime, timezone

# allow "python scripts/generate.py" from a plain checkout
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dfagen.config import RunConfig
from dfagen.engine import CanonicalEngine
from dfagen.files import read_automata, write_automata
from dfagen.model import ConfigParseError, EncodingError, InvalidArity
from dfagen.pipeline import run_pipeline
from dfagen.sink import FileDestination, ResultSink

EXIT_CONFIG = 2
EXIT_INPUT = 3


def positive_int(val: str) -> int:
    iv = int(val)
    if iv <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return iv


def load_analyzer(spec: str):
    """'package.module:callable' -> callable(EncodedAutomaton) -> AlgoResult"""
    mod_name, _, attr = spec.partition(":")
    if not attr:
        raise argparse.ArgumentTypeError(f"expected module:callable, got {spec!r}")
    return getattr(importlib.import_module(mod_name), attr)


def _save_meta_json(path: pathlib.Path, cfg: RunConfig, res: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    meta = {
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "params": {"n": cfg.n, "k": cfg.k, "root_discovered": cfg.root_discovered},
        "summary": {"count": res["count"], "leaves": res["leaves"], "elapsed": res["elapsed"]},
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2)


def build_config(args: argparse.Namespace) -> RunConfig:
    cfg = RunConfig.load(args.config, verbose=args.verbose) if args.config else RunConfig()
    # explicit flags win over the config file
    for name in ("n", "k", "output", "automata_file"):
        v = getattr(args, name)
        if v is not None:
            setattr(cfg, name, v)
    if args.root_discovered:
        cfg.root_discovered = True
    if args.verbose:
        cfg.verbose = True
    cfg.check()
    return cfg


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Enumerate canonical sink-rooted DFAs")
    parser.add_argument("-c", "--config", help="JSON run configuration")
    parser.add_argument("--n", type=positive_int, help="Number of states (incl. sink)")
    parser.add_argument("--k", type=positive_int, help="Alphabet size")
    parser.add_argument("-o", "--output", help="Write detailed per-automaton results here")
    parser.add_argument("-a", "--automata-file", dest="automata_file",
                        help="Encodings file (written after generation, read with --from-file)")
    parser.add_argument("--from-file", action="store_true",
                        help="Read encodings from --automata-file instead of generating")
    parser.add_argument("--analyzer", help="module:callable computing an AlgoResult")
    parser.add_argument("--root-discovered", action="store_true",
                        help="Treat state 1 as discovered together with the sink")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    try:
        cfg = build_config(args)
    except ConfigParseError as e:
        print(f"[error] {e}", file=sys.stderr, flush=True)
        return EXIT_CONFIG
    except InvalidArity as e:
        print(f"[error] {e}", file=sys.stderr, flush=True)
        return EXIT_INPUT

    try:
        if args.from_file:
            if not cfg.automata_file:
                print("[error] --from-file needs an automata file", file=sys.stderr, flush=True)
                return EXIT_INPUT
            automata = read_automata(cfg.automata_file, cfg.n, cfg.k, verbose=cfg.verbose)
        else:
            t0 = time.perf_counter()
            res = CanonicalEngine(cfg.n, cfg.k, root_discovered=cfg.root_discovered).search(
                verbose=cfg.verbose
            )
            automata = res["automata"]
            print(f"count   : {res['count']}")
            print(f"leaves  : {res['leaves']}")
            print(f"elapsed : {time.perf_counter() - t0:.2f}s")
            if cfg.automata_file:
                path = pathlib.Path(cfg.automata_file)
                write_automata(path, automata)
                _save_meta_json(path.with_name(path.stem + "_meta.json"), cfg, res)
                print(f"[saved] {path}")
    except (InvalidArity, EncodingError) as e:
        print(f"[error] {e}", file=sys.stderr, flush=True)
        return EXIT_INPUT

    if not args.analyzer:
        return 0

    analyze = load_analyzer(args.analyzer)
    sink = ResultSink(FileDestination(cfg.output) if cfg.output else None)
    try:
        run_pipeline(automata, analyze, sink, progress=cfg.verbose)
    finally:
        sink.close()
    sink.print_result()
    return 0


if __name__ == "__main__":
    sys.exit(main())
