"""Deterministic finite automaton matching with static and dynamic evaluation."""

from dfamatch.core.domain.automaton import Automaton, State
from dfamatch.core.domain.builder import AutomatonBuilder, StateRef, build_automaton
from dfamatch.core.domain.enums import MatchOutcome, UnmatchedPolicy
from dfamatch.core.domain.errors import MalformedAutomatonError
from dfamatch.core.domain.models import Edge, StateRecord
from dfamatch.core.engine.dynamic import DynamicMatcher
from dfamatch.core.engine.match import match
from dfamatch.core.engine.result import MatchResult
from dfamatch.core.engine.static import StaticMatcher
from dfamatch.core.engine.walk import set_matcher_debug

__all__ = [
    "Automaton",
    "AutomatonBuilder",
    "DynamicMatcher",
    "Edge",
    "MalformedAutomatonError",
    "MatchOutcome",
    "MatchResult",
    "State",
    "StateRecord",
    "StateRef",
    "StaticMatcher",
    "UnmatchedPolicy",
    "build_automaton",
    "match",
    "set_matcher_debug",
]
