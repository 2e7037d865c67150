"""
CVars Package

Named, typed runtime variables (boolean, integer, float, string) with
YAML persistence.
"""

from .types import (
    CVar,
    CVarError,
    CVarFlag,
    CVarType,
    CVarTypeError,
    CVarValue,
    DuplicateCVarError,
    check_value,
)
from .registry import CVarRegistry
from .loader import (
    CVarDefinition,
    load_definitions,
    load_values,
    save_values,
)

__all__ = [
    "CVar",
    "CVarError",
    "CVarFlag",
    "CVarType",
    "CVarTypeError",
    "CVarValue",
    "DuplicateCVarError",
    "check_value",
    "CVarRegistry",
    "CVarDefinition",
    "load_definitions",
    "load_values",
    "save_values",
]
