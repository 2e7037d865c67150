"""
CVar Loader

Loads cvar definitions and saved values from YAML, and writes saved values
back out.

File layout:
    cvars:                  # Definitions (optional)
      - name: r_vsync
        type: boolean
        default: true
        save: true
        description: Sync to vertical refresh
    values:                 # Saved values (optional)
      r_vsync: false
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .registry import CVarRegistry
from .types import CVarError, CVarFlag, CVarType


logger = logging.getLogger(__name__)


class CVarDefinition(BaseModel):
    """Schema for a cvar definition entry."""

    name: str = Field(..., min_length=1, description="Unique cvar name")
    type: CVarType = Field(..., description="Value kind")
    default: Union[bool, int, float, str] = Field(..., description="Initial value")
    save: bool = Field(default=False, description="Persist with save_values()")
    description: str = Field(default="")


_SAVED_VALUE = TypeAdapter(Union[bool, int, float, str])


def _load_yaml_file(path: Path) -> Optional[Dict[str, Any]]:
    """Load a cvar YAML file as a raw mapping."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.error(f"Invalid cvar file {path}: expected a mapping at top level")
        return None
    return data


def _section(data: Dict[str, Any], key: str, expected: type, path: Path):
    """Get a top-level section, or an empty one if it is missing or malformed."""
    section = data.get(key)
    if section is None:
        return expected()
    if not isinstance(section, expected):
        logger.warning(f"Ignoring '{key}' in {path}: expected {expected.__name__}")
        return expected()
    return section


def load_definitions(path: Union[str, Path], registry: CVarRegistry) -> int:
    """
    Define the cvars described in a YAML file.

    Malformed entries, entries that clash with an existing cvar and entries
    with a default of the wrong type are skipped with a warning.
    Returns the number of cvars defined.
    """
    path = Path(path)
    data = _load_yaml_file(path)
    if data is None:
        return 0

    count = 0
    for index, entry in enumerate(_section(data, "cvars", list, path)):
        try:
            definition = CVarDefinition.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"Skipping cvar definition #{index} in {path}: {e}")
            continue

        try:
            registry.define(
                definition.name,
                definition.type,
                definition.default,
                flags=CVarFlag.SAVE if definition.save else CVarFlag.NONE,
                description=definition.description,
            )
            count += 1
        except CVarError as e:
            logger.warning(f"Skipping cvar definition {definition.name}: {e}")

    logger.info(f"Defined {count} cvars from {path}")
    return count


def load_values(path: Union[str, Path], registry: CVarRegistry) -> int:
    """
    Apply saved values from a YAML file to already-defined cvars.

    Unknown names, malformed values and mistyped values are skipped with a
    warning. Returns the number of values applied.
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"No cvar file at {path}, keeping defaults")
        return 0

    data = _load_yaml_file(path)
    if data is None:
        return 0

    count = 0
    for name, raw_value in _section(data, "values", dict, path).items():
        cvar = registry.get(str(name))
        if cvar is None:
            logger.warning(f"Unknown cvar in {path}: {name}")
            continue
        try:
            cvar.set(_SAVED_VALUE.validate_python(raw_value))
            count += 1
        except (ValidationError, CVarError) as e:
            logger.warning(f"Skipping saved value for {name}: {e}")

    logger.info(f"Loaded {count} cvar values from {path}")
    return count


def save_values(path: Union[str, Path], registry: CVarRegistry) -> int:
    """
    Write the current value of every SAVE-flagged cvar to a YAML file.

    Any other top-level sections already in the file (such as cvar
    definitions) are kept. An existing file that cannot be read or parsed
    is left untouched and nothing is saved. Returns the number of values
    written.
    """
    path = Path(path)
    data: Dict[str, Any] = {}
    if path.exists():
        data = _load_yaml_file(path)
        if data is None:
            logger.error(f"Not saving cvars over unreadable file {path}")
            return 0

    values: Dict[str, Any] = {
        cvar.name: cvar.get() for cvar in registry.values() if cvar.saved
    }
    data["values"] = values

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)

    logger.info(f"Saved {len(values)} cvar values to {path}")
    return len(values)
