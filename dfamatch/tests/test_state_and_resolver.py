"""Tests for State handles and first-match-wins resolution."""

from __future__ import annotations

import pytest

from dfamatch.core.domain.builder import build_automaton
from dfamatch.core.domain.enums import UnmatchedPolicy
from dfamatch.core.domain.models import Edge
from dfamatch.core.engine.resolver import find_edge, resolve_transition


def test_matches_any(branch) -> None:
    q0 = branch.state("Q0")
    assert q0.matches_any("0")
    assert q0.matches_any("1")
    assert not q0.matches_any("2")
    assert not branch.state("Q1").matches_any("0")


def test_transition_follows_declared_edges(zero_one_star) -> None:
    q0 = zero_one_star.state("Q0")
    q1 = q0.transition("0")
    assert q1 == zero_one_star.state("Q1")
    assert q1.transition("1") == zero_one_star.state("Q2")
    assert zero_one_star.state("Q3").transition("1") == zero_one_star.state("Q2")


def test_transition_without_edge_rejects_by_default(zero_one_star) -> None:
    assert zero_one_star.state("Q0").transition("1") is None


def test_transition_without_edge_self_loops_when_enabled() -> None:
    automaton = build_automaton(
        {"A": (False, [("a", "B")]), "B": (True, [])},
        unmatched=UnmatchedPolicy.SELF_LOOP,
    )
    a = automaton.state("A")
    assert a.transition("z") == a
    assert not a.matches_any("z")


def test_first_declared_edge_wins() -> None:
    automaton = build_automaton(
        {
            "A": (False, [("a", "B"), ("a", "C")]),
            "B": (True, []),
            "C": (False, []),
        }
    )
    assert resolve_transition(automaton, 0, "a") == 1
    assert automaton.state("A").transition("a").name == "B"


def test_find_edge_scans_in_order() -> None:
    edges = (Edge("x", 3), Edge("y", 4), Edge("x", 5))
    assert find_edge(edges, "x") == Edge("x", 3)
    assert find_edge(edges, "y") == Edge("y", 4)
    assert find_edge(edges, "z") is None
    assert find_edge((), "x") is None


def test_state_identity_is_per_automaton(branch) -> None:
    other = build_automaton(
        {
            "Q0": (False, [("0", "Q1"), ("1", "Q2")]),
            "Q1": (True, []),
            "Q2": (True, []),
        }
    )
    assert branch.state("Q0") == branch.state(0)
    assert branch.state("Q0") != other.state("Q0")
    assert len({branch.state(0), branch.state("Q0")}) == 1


def test_state_lookup_errors(branch) -> None:
    with pytest.raises(KeyError):
        branch.state("missing")
    with pytest.raises(IndexError):
        branch.state(3)


def test_reachable_from_follows_cycles(zero_one_star) -> None:
    assert zero_one_star.reachable_from(0) == {0, 1, 2, 3}
    assert zero_one_star.reachable_from(2) == {2, 3}
    assert zero_one_star.reachable_from(2, inclusive=False) == {2, 3}
    assert zero_one_star.reachable_from(1, inclusive=False) == {2, 3}


def test_alphabet_is_sorted_distinct_guards(branch, single_accept) -> None:
    assert branch.alphabet() == ("0", "1")
    assert single_accept.alphabet() == ()
