"""Dense transition tables and edge diagnostics for authored automata.

Responsibilities:
  - Render the effective (first-match-wins) transition function as a matrix.
  - Report duplicate guards that can never fire.

Inputs/Outputs:
  - Inputs: Automaton.
  - Outputs: TransitionTable (numpy matrix plus labels), printable text.

Invariants:
  - Entries come from the resolver, so the table never disagrees with matching.
  - Only declared guards form columns; -1 marks "no transition".
  - Cells show the effective transition function: under SELF_LOOP an
    unmatched symbol maps to the state itself, never to -1.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.domain.automaton import Automaton
from ..core.engine.resolver import resolve_transition

NO_TRANSITION = -1


@dataclass(frozen=True)
class TransitionTable:
    alphabet: tuple[str, ...]
    state_names: tuple[str, ...]
    accepting: np.ndarray
    targets: np.ndarray

    def target(self, state: int, symbol: str) -> int:
        return int(self.targets[state, self.alphabet.index(symbol)])


def transition_table(automaton: Automaton) -> TransitionTable:
    alphabet = automaton.alphabet()
    targets = np.full((len(automaton), len(alphabet)), NO_TRANSITION, dtype=np.int64)
    for index in range(len(automaton)):
        for column, symbol in enumerate(alphabet):
            target = resolve_transition(automaton, index, symbol)
            if target is not None:
                targets[index, column] = target
    accepting = np.array([record.accepting for record in automaton.states], dtype=bool)
    return TransitionTable(
        alphabet=alphabet,
        state_names=automaton.names,
        accepting=accepting,
        targets=targets,
    )


def shadowed_edges(automaton: Automaton) -> list[tuple[int, int]]:
    shadowed: list[tuple[int, int]] = []
    for index, record in enumerate(automaton.states):
        seen: set[str] = set()
        for position, edge in enumerate(record.edges):
            if edge.guard in seen:
                shadowed.append((index, position))
            seen.add(edge.guard)
    return shadowed


def format_table(table: TransitionTable) -> str:
    name_width = max([len("state")] + [len(n) + 1 for n in table.state_names])
    cell_width = max(
        [3] + [len(n) for n in table.state_names] + [len(repr(symbol)) for symbol in table.alphabet]
    )
    header = "state".ljust(name_width) + " | " + " ".join(
        repr(symbol).ljust(cell_width) for symbol in table.alphabet
    )
    lines = [header, "-" * len(header)]
    for index, name in enumerate(table.state_names):
        # Accepting states are marked with a trailing '*'.
        label = name + ("*" if table.accepting[index] else "")
        cells = []
        for column in range(len(table.alphabet)):
            target = int(table.targets[index, column])
            cells.append(("-" if target == NO_TRANSITION else table.state_names[target]).ljust(cell_width))
        lines.append(label.ljust(name_width) + " | " + " ".join(cells))
    return "\n".join(lines)
