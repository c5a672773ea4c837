"""Tests for the matcher debug hook."""

from __future__ import annotations

from dfamatch.core.engine.match import match
from dfamatch.core.engine.static import StaticMatcher
from dfamatch.core.engine.walk import set_matcher_debug


def test_debug_lines_for_accepted_walk(zero_one_star) -> None:
    lines: list[str] = []
    set_matcher_debug(lines.append)

    assert match(zero_one_star.state("Q0"), "01") is True

    assert lines == [
        "MATCH_STEP state=Q0 index=0 char='0' next=Q1",
        "MATCH_STEP state=Q1 index=1 char='1' next=Q2",
        "MATCH_DONE outcome=ACCEPTED state=Q2 consumed=2",
    ]


def test_debug_lines_for_missing_transition(zero_one_star) -> None:
    lines: list[str] = []
    set_matcher_debug(lines.append)

    assert match(zero_one_star.state("Q0"), "x0") is False

    assert lines == [
        "MATCH_STEP state=Q0 index=0 char='x' next=-",
        "MATCH_DONE outcome=NO_TRANSITION state=Q0 consumed=0",
    ]


def test_static_precompute_is_reported(branch) -> None:
    lines: list[str] = []
    set_matcher_debug(lines.append)

    StaticMatcher(branch.state("Q0"), ["0", "1"])

    assert lines[-1] == "STATIC_PRECOMPUTE start=Q0 inputs=2"


def test_hook_removed_is_silent(zero_one_star) -> None:
    lines: list[str] = []
    set_matcher_debug(lines.append)
    set_matcher_debug(None)
    match(zero_one_star.state("Q0"), "01")
    assert lines == []


def test_hook_swapped_mid_walk_keeps_lines_together(zero_one_star) -> None:
    first: list[str] = []
    second: list[str] = []

    def swapping_hook(msg: str) -> None:
        first.append(msg)
        set_matcher_debug(second.append)

    set_matcher_debug(swapping_hook)
    match(zero_one_star.state("Q0"), "01")

    assert [line.split()[0] for line in first] == ["MATCH_STEP", "MATCH_STEP", "MATCH_DONE"]
    assert second == []
