"""
CVar Types

Typed runtime variables. Each CVar carries a type tag and a value of that
type; get/set are checked against the tag.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Union


CVarValue = Union[bool, int, float, str]


class CVarError(Exception):
    """Base error for the cvar store."""

    pass


class CVarTypeError(CVarError, TypeError):
    """A value does not match the cvar's declared type."""

    pass


class DuplicateCVarError(CVarError, ValueError):
    """A cvar with the same name is already registered."""

    pass


class CVarType(str, Enum):
    """Value kinds a cvar can hold."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


class CVarFlag(Flag):
    """Behaviour flags for a cvar."""

    NONE = 0
    SAVE = auto()  # Written out by save_values()


def check_value(cvar_type: CVarType, value: CVarValue) -> CVarValue:
    """
    Validate a value against a cvar type and return it in canonical form.

    bool is a subclass of int in Python, so it is rejected explicitly for
    integer and float cvars. Integers are widened for float cvars.
    """
    if cvar_type is CVarType.BOOLEAN:
        if isinstance(value, bool):
            return value
    elif cvar_type is CVarType.INTEGER:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif cvar_type is CVarType.FLOAT:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif cvar_type is CVarType.STRING:
        if isinstance(value, str):
            return value

    raise CVarTypeError(
        f"Expected {cvar_type.value} value, got {type(value).__name__}: {value!r}"
    )


@dataclass
class CVar:
    """A named, typed, mutable runtime variable."""

    name: str
    type: CVarType
    default: CVarValue
    flags: CVarFlag = CVarFlag.NONE
    description: str = ""
    _value: CVarValue = field(init=False, repr=False)

    def __post_init__(self):
        if not self.name:
            raise CVarError("CVar requires a name")
        self.type = CVarType(self.type)
        self.default = check_value(self.type, self.default)
        self._value = self.default

    @property
    def value(self) -> CVarValue:
        return self._value

    def get(self) -> CVarValue:
        """Get the current value."""
        return self._value

    def set(self, value: CVarValue) -> None:
        """Set the value, rejecting values of the wrong type."""
        self._value = check_value(self.type, value)

    def reset(self) -> None:
        """Restore the default value."""
        self._value = self.default

    @property
    def saved(self) -> bool:
        return bool(self.flags & CVarFlag.SAVE)
