"""Canonical matching walk shared by every binding time.

Responsibilities:
  - Advance through the input one character at a time via the resolver.
  - Report acceptance of the state reached when the input is exhausted.
  - Emit optional debug lines through an installable hook.

Inputs/Outputs:
  - Inputs: Automaton, start index, input text.
  - Outputs: MatchResult.

Invariants:
  - Iterative; stack depth does not grow with input length.
  - Pure apart from the debug hook; never raises for a well-formed automaton.
"""

from __future__ import annotations

from typing import Callable, Sequence

from ..domain.automaton import Automaton
from ..domain.enums import MatchOutcome
from .resolver import resolve_transition
from .result import MatchResult

_DEBUG_FN: Callable[[str], None] | None = None


def set_matcher_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def emit_debug(msg: str) -> None:
    if _DEBUG_FN is not None:
        _DEBUG_FN(msg)


def walk_input(
    automaton: Automaton,
    start: int,
    text: Sequence[str],
    record_path: bool = False,
) -> MatchResult:
    debug = _DEBUG_FN
    names = automaton.names
    current = start
    path: list[int] | None = [start] if record_path else None

    for position, c in enumerate(text):
        target = resolve_transition(automaton, current, c)
        if debug is not None:
            next_name = names[target] if target is not None else "-"
            debug(f"MATCH_STEP state={names[current]} index={position} char={c!r} next={next_name}")
        if target is None:
            return _finish(
                MatchResult(
                    accepted=False,
                    outcome=MatchOutcome.NO_TRANSITION,
                    final_state=current,
                    consumed=position,
                    path=tuple(path) if path is not None else None,
                ),
                names,
                debug,
            )
        current = target
        if path is not None:
            path.append(current)

    accepted = automaton.states[current].accepting
    return _finish(
        MatchResult(
            accepted=accepted,
            outcome=MatchOutcome.ACCEPTED if accepted else MatchOutcome.NOT_ACCEPTING,
            final_state=current,
            consumed=len(text),
            path=tuple(path) if path is not None else None,
        ),
        names,
        debug,
    )


def _finish(
    result: MatchResult,
    names: tuple[str, ...],
    debug: Callable[[str], None] | None,
) -> MatchResult:
    if debug is not None:
        debug(
            f"MATCH_DONE outcome={result.outcome.value} state={names[result.final_state]} "
            f"consumed={result.consumed}"
        )
    return result
