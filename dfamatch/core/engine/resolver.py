"""First-match-wins transition resolution.

Responsibilities:
  - Pick the edge that fires for a character on a given state.
  - Apply the automaton's unmatched policy when no edge fires.

Invariants:
  - Single source of truth for "what state comes next"; every matcher and
    every State handle delegates here.
  - Edges are scanned in declared order; later duplicates never fire.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..domain.enums import UnmatchedPolicy
from ..domain.models import Edge

if TYPE_CHECKING:
    from ..domain.automaton import Automaton


def find_edge(edges: Sequence[Edge], c: str) -> Edge | None:
    for edge in edges:
        if edge.guard == c:
            return edge
    return None


def resolve_transition(automaton: Automaton, index: int, c: str) -> int | None:
    # None means "no transition": the walk rejects the input.
    edge = find_edge(automaton.states[index].edges, c)
    if edge is not None:
        return edge.target
    if automaton.unmatched is UnmatchedPolicy.SELF_LOOP:
        return index
    return None
