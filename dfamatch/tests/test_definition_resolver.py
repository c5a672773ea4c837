from __future__ import annotations

from pathlib import Path

import pytest

from dfamatch.infra.definitions.resolve_definition import (
    DefinitionResolutionError,
    resolve_definition,
)


def test_resolve_definition_alias_canonical_and_path(tmp_path: Path) -> None:
    (tmp_path / "PARITY_V1.json").write_text("{}", encoding="utf-8")
    (tmp_path / "PARITY_V3.json").write_text("{}", encoding="utf-8")
    (tmp_path / "OTHER_V9.json").write_text("{}", encoding="utf-8")

    resolved_alias, alias_path = resolve_definition("PARITY", definitions_dir=tmp_path)
    resolved_versioned, _ = resolve_definition("PARITY_V1", definitions_dir=tmp_path)
    resolved_path, _ = resolve_definition(str(tmp_path / "OTHER_V9.json"))

    assert resolved_alias == "PARITY_V3"
    assert alias_path == tmp_path / "PARITY_V3.json"
    assert resolved_versioned == "PARITY_V1"
    assert resolved_path == "OTHER_V9"


def test_resolve_definition_errors(tmp_path: Path) -> None:
    (tmp_path / "PARITY_V1.json").write_text("{}", encoding="utf-8")

    with pytest.raises(DefinitionResolutionError):
        resolve_definition("PARITY_V2", definitions_dir=tmp_path)
    with pytest.raises(DefinitionResolutionError):
        resolve_definition("MISSING", definitions_dir=tmp_path)
    with pytest.raises(DefinitionResolutionError):
        resolve_definition("not-an-id", definitions_dir=tmp_path)
    with pytest.raises(DefinitionResolutionError):
        resolve_definition(str(tmp_path / "ABSENT_V1.json"))


def test_shipped_alias_resolves_to_default_dir() -> None:
    resolved, path = resolve_definition("ZERO_ONE_STAR")
    assert resolved == "ZERO_ONE_STAR_V1"
    assert path.is_file()
