"""Match inputs against an automaton definition from the command line.

Purpose:
  - Resolve and load a JSON automaton definition, then report accept/reject
    for each input.
Inputs:
  - CLI args for definition id/path, start state and inputs.
Outputs:
  - MATCH and SUMMARY lines on stdout; exit code 2 on definition errors.
Example:
  - PYTHONPATH=. python3 -m dfamatch.cli.run_match --definition ZERO_ONE_STAR --input 01 --input 011
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from dfamatch.analysis.table import format_table, shadowed_edges, transition_table
from dfamatch.cli._debug_utils import _dbg, _debug_enabled, collect_inputs
from dfamatch.core.domain.errors import MalformedAutomatonError
from dfamatch.core.engine.dynamic import DynamicMatcher
from dfamatch.core.engine.match import match
from dfamatch.core.engine.walk import set_matcher_debug
from dfamatch.infra.definitions.loader import DefinitionValidationError, load_definition
from dfamatch.infra.definitions.resolve_definition import (
    DefinitionResolutionError,
    resolve_definition,
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Match inputs against a DFA definition")
    parser.add_argument("--definition", required=True, help="Definition id, alias or .json path")
    parser.add_argument("--definitions-dir", default=None, help="Directory holding <ID>.json files")
    parser.add_argument("--start", default=None, help="Start state name (default: definition start)")
    parser.add_argument("--input", action="append", dest="inputs", default=[], help="Input to match (repeatable)")
    parser.add_argument("--stdin", action="store_true", help="Read one input per line from stdin")
    parser.add_argument("--trace", action="store_true", help="Print outcome, consumed count and path")
    parser.add_argument("--table", action="store_true", help="Print the transition table")
    parser.add_argument("--debug", action="store_true", help="Print per-step debug lines")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    definitions_dir = Path(args.definitions_dir) if args.definitions_dir else None

    try:
        resolved_id, resolved_path = resolve_definition(args.definition, definitions_dir)
    except DefinitionResolutionError as exc:
        _dbg(args, f"resolution failed: {exc}")
        print("SUMMARY status=ERROR message=DEFINITION_NOT_FOUND")
        return 2

    if _debug_enabled(args):
        set_matcher_debug(lambda msg: _dbg(args, msg))
    try:
        try:
            definition = load_definition(resolved_path)
        except (DefinitionValidationError, MalformedAutomatonError) as exc:
            _dbg(args, f"load failed: {exc}")
            print("SUMMARY status=ERROR message=DEFINITION_INVALID")
            return 2

        print(f"SUMMARY resolved_definition_id={resolved_id}")
        print(f"SUMMARY resolved_definition_path={resolved_path.resolve()}")

        start = definition.start
        if args.start is not None:
            try:
                start = definition.automaton.state(args.start)
            except KeyError:
                print("SUMMARY status=ERROR message=UNKNOWN_START_STATE")
                return 2
        static = definition.static if start == definition.start else None

        if args.table:
            print(format_table(transition_table(definition.automaton)))
            for state_index, position in shadowed_edges(definition.automaton):
                name = definition.automaton.names[state_index]
                print(f"WARNING shadowed_edge state={name} position={position}")

        matcher = DynamicMatcher()
        accepted_count = 0
        rejected_count = 0
        for text in collect_inputs(args):
            if args.trace:
                result = matcher.trace(start, text)
                accepted = result.accepted
                path = " ".join(definition.automaton.names[i] for i in result.path or ())
                print(
                    f"MATCH input={text!r} accepted={accepted} outcome={result.outcome.value} "
                    f"consumed={result.consumed} path={path}"
                )
            else:
                accepted = match(start, text, static=static)
                print(f"MATCH input={text!r} accepted={accepted}")
            if accepted:
                accepted_count += 1
            else:
                rejected_count += 1
    finally:
        set_matcher_debug(None)

    print(f"SUMMARY accepted={accepted_count} rejected={rejected_count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
