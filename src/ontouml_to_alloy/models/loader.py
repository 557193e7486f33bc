"""Reading OntoUML interchange files.

JSON is a subset of YAML, so one PyYAML parser reads both. A file may
hold a full ``Project`` or just its root ``Package``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ontouml_to_alloy.models.enums import OntoumlType
from ontouml_to_alloy.models.project import Project

MODEL_SUFFIXES = frozenset({".json", ".yaml", ".yml"})


class LoaderError(Exception):
    """A model file could not be read as a mapping.

    Attributes
    ----------
        path: The offending file, when known.

    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Parse a model file into its raw root mapping.

    Raises
    ------
        LoaderError: Missing file, unsupported suffix, unparsable or
            empty content, or a root that is not a mapping.

    """
    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise LoaderError(reason, path)

    if path.suffix.lower() not in MODEL_SUFFIXES:
        raise LoaderError(
            f"Unsupported file extension '{path.suffix}' (expected {', '.join(sorted(MODEL_SUFFIXES))})",
            path,
        )

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise LoaderError(f"Cannot parse model: {e}", path) from e
    except OSError as e:
        raise LoaderError(f"Cannot read model: {e}", path) from e

    if data is None:
        raise LoaderError("Model file is empty", path)
    if not isinstance(data, dict):
        raise LoaderError(f"Model root must be an object, got {type(data).__name__}", path)
    return data


def _as_project_data(data: dict[str, Any]) -> dict[str, Any]:
    """Wrap a bare root package into project form."""
    if data.get("type") == OntoumlType.PACKAGE.value:
        return {"type": OntoumlType.PROJECT.value, "name": data.get("name"), "model": data}
    return data


def load_project(path: Path) -> Project:
    """Load a model file into a ``Project`` with resolved references.

    Raises
    ------
        LoaderError: If the file cannot be read.
        pydantic.ValidationError: If the content is not an OntoUML model.

    """
    return Project.model_validate(_as_project_data(load_yaml_file(path)))


def validate_project_file(path: Path) -> list[str]:
    """Check a model file against the interchange format without raising.

    Returns ``loc: msg`` strings, one per schema error, or the loader
    message when the file cannot be read. An empty list means the file
    parses as a project.
    """
    try:
        data = load_yaml_file(path)
    except LoaderError as e:
        return [str(e)]

    try:
        Project.model_validate(_as_project_data(data))
    except ValidationError as e:
        return [f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()]
    return []
