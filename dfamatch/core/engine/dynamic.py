"""Run-time matching for inputs known only at the call site."""

from __future__ import annotations

from typing import Sequence

from ..domain.automaton import State
from .result import MatchResult
from .walk import walk_input


class DynamicMatcher:
    def match(self, start: State, text: Sequence[str]) -> bool:
        return walk_input(start.automaton, start.index, text).accepted

    def trace(self, start: State, text: Sequence[str]) -> MatchResult:
        return walk_input(start.automaton, start.index, text, record_path=True)


__all__ = ["DynamicMatcher"]
