from __future__ import annotations

import pytest

from dfamatch.core.domain.automaton import Automaton
from dfamatch.core.domain.builder import AutomatonBuilder, build_automaton
from dfamatch.core.engine.walk import set_matcher_debug


@pytest.fixture(autouse=True)
def _reset_matcher_debug():
    yield
    set_matcher_debug(None)


@pytest.fixture
def zero_one_star() -> Automaton:
    # (01)*, built with forward references to exercise the two-phase protocol.
    builder = AutomatonBuilder()
    q0 = builder.allocate("Q0", accepting=True)
    q1 = builder.allocate("Q1")
    q2 = builder.allocate("Q2", accepting=True)
    q3 = builder.allocate("Q3")
    builder.add_edge(q0, "0", q1)
    builder.add_edge(q1, "1", q2)
    builder.add_edge(q2, "0", q3)
    builder.add_edge(q3, "1", q2)
    return builder.build()


@pytest.fixture
def branch() -> Automaton:
    return build_automaton(
        {
            "Q0": (False, [("0", "Q1"), ("1", "Q2")]),
            "Q1": (True, []),
            "Q2": (True, []),
        }
    )


@pytest.fixture
def single_accept() -> Automaton:
    return build_automaton({"Q": (True, [])})
