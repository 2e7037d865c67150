"""
CVar Bridge

The console's view of the cvar store: lookup by name, conversion of a
console token into a typed value, and display formatting.

Conversion never fails. Unparsable numbers become zero, matching the
C atoi/atof behaviour console users expect ("12abc" -> 12, "abc" -> 0).
"""

import logging
import math
import re
from typing import List, Optional, Protocol, runtime_checkable

from cvars import CVar, CVarRegistry, CVarType, CVarTypeError, CVarValue


logger = logging.getLogger(__name__)


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE | re.ASCII,
)

FALSE_TOKENS = ("0", "false")


def parse_bool(text: str) -> bool:
    """Only the exact tokens "0" and "false" are false."""
    return text not in FALSE_TOKENS


def parse_int(text: str) -> int:
    """Parse the leading base-10 integer of text, or 0."""
    match = _INT_PREFIX.match(text)
    if match is None:
        logger.warning(f"Unparsable integer value: {text!r}, using 0")
        return 0
    return int(match.group(1))


def parse_float(text: str) -> float:
    """Parse the leading decimal number of text, or 0.0."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        logger.warning(f"Unparsable float value: {text!r}, using 0.0")
        return 0.0
    return float(match.group(1))


def convert_value(cvar_type: CVarType, text: str) -> CVarValue:
    """Convert a console token into a value of the given cvar type."""
    if cvar_type is CVarType.BOOLEAN:
        return parse_bool(text)
    elif cvar_type is CVarType.INTEGER:
        return parse_int(text)
    elif cvar_type is CVarType.FLOAT:
        return parse_float(text)
    elif cvar_type is CVarType.STRING:
        return text
    raise CVarTypeError(f"Unhandled cvar type: {cvar_type}")


def format_value(cvar_type: CVarType, value: CVarValue) -> str:
    """Render a cvar value for the console."""
    if cvar_type is CVarType.BOOLEAN:
        return "true" if value else "false"
    elif cvar_type is CVarType.INTEGER:
        return str(int(value))
    elif cvar_type is CVarType.FLOAT:
        if math.isnan(value) or math.isinf(value):
            return str(value)
        return f"{value:.4f}"
    elif cvar_type is CVarType.STRING:
        return str(value)
    raise CVarTypeError(f"Unhandled cvar type: {cvar_type}")


@runtime_checkable
class CVarBridge(Protocol):
    """What the console needs from a cvar store."""

    def lookup(self, name: str) -> Optional[CVar]:
        ...

    def set_from_string(self, cvar: CVar, text: str) -> None:
        ...

    def format(self, cvar: CVar) -> str:
        ...

    def names(self) -> List[str]:
        ...


class RegistryCVarBridge:
    """CVarBridge backed by a cvars.CVarRegistry."""

    def __init__(self, registry: CVarRegistry):
        self._registry = registry

    @property
    def registry(self) -> CVarRegistry:
        return self._registry

    def lookup(self, name: str) -> Optional[CVar]:
        return self._registry.get(name)

    def set_from_string(self, cvar: CVar, text: str) -> None:
        """Convert text to the cvar's type and store it."""
        cvar.set(convert_value(cvar.type, text))
        logger.debug(f"Set cvar {cvar.name} = {cvar.get()!r}")

    def format(self, cvar: CVar) -> str:
        return format_value(cvar.type, cvar.get())

    def names(self) -> List[str]:
        return self._registry.names()
