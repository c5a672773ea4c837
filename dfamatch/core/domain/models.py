"""Domain models for the state arena.

Responsibilities:
  - Define immutable records for edges and states addressed by arena index.

Invariants:
  - Models are plain containers; resolution logic lives in core.engine.resolver.
  - Edge order inside StateRecord.edges is the tie-break order.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    guard: str
    target: int


@dataclass(frozen=True)
class StateRecord:
    accepting: bool
    edges: tuple[Edge, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return not self.edges
