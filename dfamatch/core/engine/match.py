"""Single entry point for matching regardless of binding time.

Responsibilities:
  - Expose match(start, text) with one signature for static and dynamic use.
  - Prefer a precomputed answer when the caller supplies a StaticMatcher for
    the same start state.
"""

from __future__ import annotations

from typing import Sequence

from ..domain.automaton import State
from .static import StaticMatcher
from .walk import walk_input


def match(start: State, text: Sequence[str], static: StaticMatcher | None = None) -> bool:
    if static is not None:
        if static.start != start:
            raise ValueError(
                f"StaticMatcher was built for state {static.start.name!r}, not {start.name!r}"
            )
        if static.is_precomputed(text):
            return static.match(text)
    return walk_input(start.automaton, start.index, text).accepted


__all__ = ["match"]
