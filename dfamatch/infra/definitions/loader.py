from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dfamatch.core.domain.automaton import Automaton, State
from dfamatch.core.domain.builder import build_automaton
from dfamatch.core.domain.enums import UnmatchedPolicy, policy_from_label
from dfamatch.core.engine.static import StaticMatcher


class DefinitionValidationError(ValueError):
    pass


class ExpectationMismatchError(DefinitionValidationError):
    def __init__(self, automaton_id: str, mismatches: list[tuple[str, bool, bool]]) -> None:
        self.automaton_id = automaton_id
        self.mismatches = mismatches
        detail = ", ".join(f"{text!r}: expected={want} actual={got}" for text, want, got in mismatches)
        super().__init__(f"Expectations failed for {automaton_id}: {detail}")


@dataclass(frozen=True)
class AutomatonDefinition:
    automaton_id: str
    description: str
    automaton: Automaton
    start: State
    expectations: dict[str, bool]
    static: StaticMatcher


def default_definitions_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "definitions"


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise DefinitionValidationError(f"Missing required field '{key}' in automaton definition")
    value = payload[key]
    if expected_type is not bool and isinstance(value, bool):
        raise DefinitionValidationError(f"Field '{key}' must be {expected_type.__name__}")
    if not isinstance(value, expected_type):
        raise DefinitionValidationError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def _parse_states(raw_states: list[Any]) -> dict[str, tuple[bool, list[tuple[str, str]]]]:
    if not raw_states:
        raise DefinitionValidationError("Field 'states' must not be empty")
    states: dict[str, tuple[bool, list[tuple[str, str]]]] = {}
    for position, raw in enumerate(raw_states):
        if not isinstance(raw, dict):
            raise DefinitionValidationError(f"states[{position}] must be an object")
        name = _require(raw, "name", str)
        if name in states:
            raise DefinitionValidationError(f"Duplicate state name '{name}'")
        accepting = _require(raw, "accepting", bool)
        edges: list[tuple[str, str]] = []
        raw_edges = _require(raw, "edges", list) if "edges" in raw else []
        for edge in raw_edges:
            if (
                not isinstance(edge, list)
                or len(edge) != 2
                or not all(isinstance(part, str) for part in edge)
            ):
                raise DefinitionValidationError(
                    f"Edges of state '{name}' must be [guard, target] string pairs"
                )
            edges.append((edge[0], edge[1]))
        states[name] = (accepting, edges)
    return states


def _parse_expectations(payload: dict[str, Any]) -> dict[str, bool]:
    if "expect" not in payload:
        return {}
    raw = _require(payload, "expect", dict)
    expectations: dict[str, bool] = {}
    for text, value in raw.items():
        if not isinstance(value, bool):
            raise DefinitionValidationError(f"Expectation for {text!r} must be bool")
        expectations[text] = value
    return expectations


def load_definition(path: Path) -> AutomatonDefinition:
    if not path.exists():
        raise DefinitionValidationError(f"Automaton definition not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DefinitionValidationError(f"Invalid JSON in {path.name}: {exc}") from exc
    if not isinstance(payload, dict):
        raise DefinitionValidationError("Automaton definition must be a JSON object")

    automaton_id = _require(payload, "automaton_id", str)
    if automaton_id != path.stem:
        raise DefinitionValidationError(
            f"automaton_id mismatch: file is '{path.stem}', definition has '{automaton_id}'"
        )
    description = _require(payload, "description", str)

    unmatched = UnmatchedPolicy.REJECT
    if "unmatched" in payload:
        try:
            unmatched = policy_from_label(_require(payload, "unmatched", str))
        except ValueError as exc:
            raise DefinitionValidationError(str(exc)) from exc

    states = _parse_states(_require(payload, "states", list))
    start_name = _require(payload, "start", str)
    if start_name not in states:
        raise DefinitionValidationError(f"Start state '{start_name}' is not defined")

    automaton = build_automaton(states, unmatched=unmatched)
    start = automaton.state(start_name)
    expectations = _parse_expectations(payload)

    static = StaticMatcher(start, expectations.keys())
    mismatches = static.verify(expectations)
    if mismatches:
        raise ExpectationMismatchError(automaton_id, mismatches)

    return AutomatonDefinition(
        automaton_id=automaton_id,
        description=description,
        automaton=automaton,
        start=start,
        expectations=expectations,
        static=static,
    )
