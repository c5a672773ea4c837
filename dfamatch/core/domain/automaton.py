"""Immutable automaton arena and state handles.

Responsibilities:
  - Hold every StateRecord of one graph, addressed by integer index.
  - Expose State handles with the per-state queries used by the matchers.
  - Compute the set of states reachable from a start state.

Inputs/Outputs:
  - Inputs: produced by AutomatonBuilder.build; never constructed mid-match.
  - Outputs: State handles consumed by the static and dynamic matchers.

Invariants:
  - Every edge target is a valid index into states (checked by the builder).
  - Read-only after construction; safe to share across threads.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..engine.resolver import find_edge, resolve_transition
from .enums import UnmatchedPolicy
from .errors import MalformedAutomatonError
from .models import Edge, StateRecord


@dataclass(frozen=True, eq=False)
class Automaton:
    states: tuple[StateRecord, ...]
    names: tuple[str, ...]
    unmatched: UnmatchedPolicy = UnmatchedPolicy.REJECT

    def __post_init__(self) -> None:
        if not self.states:
            raise MalformedAutomatonError("Automaton must have at least one state")
        if len(self.names) != len(self.states):
            raise MalformedAutomatonError(
                f"names has {len(self.names)} entries for {len(self.states)} states"
            )
        if len(set(self.names)) != len(self.names):
            raise MalformedAutomatonError("State names must be unique")
        for name, record in zip(self.names, self.states):
            for edge in record.edges:
                if not isinstance(edge.guard, str) or len(edge.guard) != 1:
                    raise MalformedAutomatonError(
                        f"Guard on state '{name}' must be a single character, got {edge.guard!r}"
                    )
                target = edge.target
                if isinstance(target, bool) or not isinstance(target, int) or not 0 <= target < len(self.states):
                    raise MalformedAutomatonError(
                        f"Edge from '{name}' targets a state outside this automaton: {target!r}"
                    )

    def __len__(self) -> int:
        return len(self.states)

    def index_of(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise KeyError(f"Unknown state name: {name}") from None

    def state(self, key: int | str) -> "State":
        if isinstance(key, str):
            return State(self, self.index_of(key))
        if not 0 <= key < len(self.states):
            raise IndexError(f"State index out of range: {key}")
        return State(self, key)

    def alphabet(self) -> tuple[str, ...]:
        return tuple(sorted({edge.guard for record in self.states for edge in record.edges}))

    def reachable_from(self, start: int, inclusive: bool = True) -> set[int]:
        reached: set[int] = {start} if inclusive else set()
        stack = [start]
        seen: set[int] = set()
        while stack:
            index = stack.pop()
            if index in seen:
                continue
            seen.add(index)
            for edge in self.states[index].edges:
                reached.add(edge.target)
                if edge.target not in seen:
                    stack.append(edge.target)
        return reached


class State:
    """Non-owning handle to one state of an automaton.

    Handles compare by identity of the automaton object plus index, so two
    structurally identical graphs never share states.
    """

    __slots__ = ("automaton", "index")

    def __init__(self, automaton: Automaton, index: int) -> None:
        self.automaton = automaton
        self.index = index

    @property
    def name(self) -> str:
        return self.automaton.names[self.index]

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self.automaton.states[self.index].edges

    def is_accepting(self) -> bool:
        return self.automaton.states[self.index].accepting

    def is_terminal(self) -> bool:
        return self.automaton.states[self.index].is_terminal

    def matches_any(self, c: str) -> bool:
        return find_edge(self.edges, c) is not None

    def transition(self, c: str) -> State | None:
        target = resolve_transition(self.automaton, self.index, c)
        if target is None:
            return None
        return State(self.automaton, target)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.automaton is other.automaton and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.automaton), self.index))

    def __repr__(self) -> str:
        return f"State({self.name!r}, index={self.index}, accepting={self.is_accepting()})"
