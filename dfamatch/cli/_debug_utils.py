from __future__ import annotations

import argparse
import sys
from typing import Iterable, List


def _debug_enabled(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "debug", False))


def _dbg(args: argparse.Namespace, msg: str) -> None:
    if _debug_enabled(args):
        print(f"[debug] {msg}")


def collect_inputs(args: argparse.Namespace, stdin: Iterable[str] | None = None) -> List[str]:
    inputs = list(getattr(args, "inputs", None) or [])
    if getattr(args, "stdin", False):
        source = sys.stdin if stdin is None else stdin
        # One input per line; only the line terminator is stripped.
        inputs.extend(line.rstrip("\r\n") for line in source)
    return inputs
