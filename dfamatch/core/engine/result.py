"""Match result payload for a single walk over an input.

Responsibilities:
  - Capture the outcome, final state and consumed prefix for traces/audit.

Inputs/Outputs:
  - Inputs: produced by walk.walk_input.
  - Outputs: immutable dataclass consumed by matchers and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.enums import MatchOutcome


@dataclass(frozen=True)
class MatchResult:
    accepted: bool
    outcome: MatchOutcome
    final_state: int
    consumed: int
    path: tuple[int, ...] | None = None
