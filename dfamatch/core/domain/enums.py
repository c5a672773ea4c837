"""Domain enums for automaton construction and match outcomes.

Responsibilities:
  - Define the unmatched-character policy chosen per automaton.
  - Define stable outcome codes reported by the matching walk.

Invariants:
  - Enum values are used in definition files and CLI output; keep them stable.
"""

from __future__ import annotations

from enum import Enum


class UnmatchedPolicy(Enum):
    REJECT = "reject"
    SELF_LOOP = "self_loop"


class MatchOutcome(Enum):
    ACCEPTED = "ACCEPTED"
    NOT_ACCEPTING = "NOT_ACCEPTING"
    NO_TRANSITION = "NO_TRANSITION"


def policy_from_label(label: str) -> UnmatchedPolicy:
    try:
        return UnmatchedPolicy(label)
    except ValueError:
        allowed = ", ".join(p.value for p in UnmatchedPolicy)
        raise ValueError(f"Unknown unmatched policy '{label}' (expected one of: {allowed})") from None
