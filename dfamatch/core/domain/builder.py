"""Two-phase automaton construction.

Responsibilities:
  - Allocate state identities first, then fill edge lists, so edges may point
    at states that are defined later (forward references, cycles).
  - Reject malformed graphs at build time, never mid-match.

Inputs/Outputs:
  - Inputs: state names, acceptance flags, (guard, target) pairs.
  - Outputs: an immutable Automaton.

Invariants:
  - A StateRef is only valid for the builder that allocated it.
  - Guards are exactly one character.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Iterable, Mapping, Sequence

from .automaton import Automaton
from .enums import UnmatchedPolicy
from .errors import MalformedAutomatonError
from .models import Edge, StateRecord


@dataclass(frozen=True)
class StateRef:
    index: int
    owner: int


_BUILDER_IDS = count(1)


class AutomatonBuilder:
    def __init__(self) -> None:
        self._token = next(_BUILDER_IDS)
        self._names: list[str] = []
        self._accepting: list[bool] = []
        self._edges: list[list[Edge]] = []

    def allocate(self, name: str | None = None, accepting: bool = False) -> StateRef:
        index = len(self._names)
        if name is None:
            name = f"Q{index}"
        if not isinstance(name, str) or not name:
            raise MalformedAutomatonError("State name must be a non-empty string")
        if name in self._names:
            raise MalformedAutomatonError(f"Duplicate state name: {name}")
        self._names.append(name)
        self._accepting.append(bool(accepting))
        self._edges.append([])
        return StateRef(index=index, owner=self._token)

    def set_accepting(self, ref: StateRef, accepting: bool) -> None:
        self._accepting[self._check_ref(ref)] = bool(accepting)

    def add_edge(self, source: StateRef, guard: str, target: StateRef) -> None:
        src = self._check_ref(source)
        dst = self._check_ref(target)
        self._edges[src].append(Edge(guard=_check_guard(guard, self._names[src]), target=dst))

    def set_edges(self, source: StateRef, edges: Iterable[tuple[str, StateRef]]) -> None:
        src = self._check_ref(source)
        checked = [
            Edge(guard=_check_guard(guard, self._names[src]), target=self._check_ref(target))
            for guard, target in edges
        ]
        self._edges[src] = checked

    def build(self, unmatched: UnmatchedPolicy = UnmatchedPolicy.REJECT) -> Automaton:
        if not self._names:
            raise MalformedAutomatonError("Automaton must have at least one state")
        records = tuple(
            StateRecord(accepting=accepting, edges=tuple(edges))
            for accepting, edges in zip(self._accepting, self._edges)
        )
        return Automaton(states=records, names=tuple(self._names), unmatched=unmatched)

    def _check_ref(self, ref: StateRef) -> int:
        if not isinstance(ref, StateRef) or ref.owner != self._token:
            raise MalformedAutomatonError(f"Edge target is not a member of this automaton: {ref!r}")
        if not 0 <= ref.index < len(self._names):
            raise MalformedAutomatonError(f"State index out of range: {ref.index}")
        return ref.index


def _check_guard(guard: str, state_name: str) -> str:
    if not isinstance(guard, str) or len(guard) != 1:
        raise MalformedAutomatonError(
            f"Guard on state '{state_name}' must be a single character, got {guard!r}"
        )
    return guard


def build_automaton(
    states: Mapping[str, tuple[bool, Sequence[tuple[str, str]]]],
    unmatched: UnmatchedPolicy = UnmatchedPolicy.REJECT,
) -> Automaton:
    """Build from ``{name: (accepting, [(guard, target_name), ...])}``.

    Declaration order of the mapping fixes the state indices.
    """
    builder = AutomatonBuilder()
    refs = {name: builder.allocate(name, accepting) for name, (accepting, _) in states.items()}
    for name, (_, edges) in states.items():
        pairs: list[tuple[str, StateRef]] = []
        for guard, target_name in edges:
            if target_name not in refs:
                raise MalformedAutomatonError(
                    f"Edge from '{name}' targets unknown state '{target_name}'"
                )
            pairs.append((guard, refs[target_name]))
        builder.set_edges(refs[name], pairs)
    return builder.build(unmatched=unmatched)
