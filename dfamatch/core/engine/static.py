"""Ahead-of-use matching for inputs fixed before they are needed.

Responsibilities:
  - Evaluate a known set of inputs once, at construction, and keep the results.
  - Answer later queries for those inputs without walking the graph again.
  - Compare the precomputed table against expected outcomes.

Inputs/Outputs:
  - Inputs: start State and the inputs known ahead of use.
  - Outputs: booleans, identical to DynamicMatcher for the same inputs.

Invariants:
  - Every result comes from walk.walk_input; precomputation is only caching.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ..domain.automaton import State
from .walk import emit_debug, walk_input


class StaticMatcher:
    def __init__(self, start: State, inputs: Iterable[Sequence[str]] = ()) -> None:
        self.start = start
        self._results: dict[str | tuple[str, ...], bool] = {}
        for text in inputs:
            key = _cache_key(text)
            if key not in self._results:
                self._results[key] = self._evaluate(key)
        emit_debug(f"STATIC_PRECOMPUTE start={start.name} inputs={len(self._results)}")

    def _evaluate(self, text: Sequence[str]) -> bool:
        return walk_input(self.start.automaton, self.start.index, text).accepted

    def is_precomputed(self, text: Sequence[str]) -> bool:
        return _cache_key(text) in self._results

    def match(self, text: Sequence[str]) -> bool:
        key = _cache_key(text)
        cached = self._results.get(key)
        if cached is not None:
            return cached
        result = self._evaluate(key)
        self._results[key] = result
        return result

    def results(self) -> dict[str | tuple[str, ...], bool]:
        return dict(self._results)

    def verify(self, expected: Mapping[str, bool]) -> list[tuple[str, bool, bool]]:
        """Return ``(input, expected, actual)`` for every disagreement."""
        mismatches: list[tuple[str, bool, bool]] = []
        for text, want in expected.items():
            got = self.match(text)
            if got != want:
                mismatches.append((text, want, got))
        return mismatches


def _cache_key(text: Sequence[str]) -> str | tuple[str, ...]:
    # Non-str character sequences (lists, tuples) are cached by element tuple.
    if isinstance(text, str):
        return text
    return tuple(text)


__all__ = ["StaticMatcher"]
