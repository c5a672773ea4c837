from __future__ import annotations

import re
from pathlib import Path

from dfamatch.infra.definitions.loader import default_definitions_dir

_CANONICAL_RE = re.compile(r"^([A-Z0-9_]+?)_V([0-9]+)$")
_ALIAS_RE = re.compile(r"^[A-Z0-9_]+$")


class DefinitionResolutionError(ValueError):
    pass


def _find_latest(definitions_dir: Path, name: str) -> tuple[str, Path]:
    pattern = re.compile(rf"^{re.escape(name)}_V([0-9]+)\.json$")
    max_version = -1
    resolved_name: str | None = None
    for path in definitions_dir.iterdir():
        if not path.is_file():
            continue
        match = pattern.match(path.name)
        if match is None:
            continue
        version = int(match.group(1))
        if version > max_version:
            max_version = version
            resolved_name = path.stem
    if resolved_name is None:
        raise DefinitionResolutionError(f"No versioned definitions for '{name}'")
    return resolved_name, definitions_dir / f"{resolved_name}.json"


def resolve_definition(
    definition_input: str,
    definitions_dir: Path | None = None,
) -> tuple[str, Path]:
    if definitions_dir is None:
        definitions_dir = default_definitions_dir()

    if definition_input.endswith(".json"):
        path = Path(definition_input)
        if path.is_file():
            return path.stem, path
        raise DefinitionResolutionError(f"Definition file not found: {definition_input}")

    if _CANONICAL_RE.match(definition_input):
        path = definitions_dir / f"{definition_input}.json"
        if path.exists():
            return definition_input, path
        raise DefinitionResolutionError("Canonical versioned definition not found")

    if _ALIAS_RE.match(definition_input):
        if not definitions_dir.is_dir():
            raise DefinitionResolutionError(f"Definitions directory not found: {definitions_dir}")
        return _find_latest(definitions_dir, definition_input)

    raise DefinitionResolutionError("Unsupported definition id format")
