"""
CVar Registry

Name-keyed store of CVars. One registry is created at startup and handed
to whatever needs to define or look up variables.
"""

import logging
import threading
from typing import Dict, Iterator, List, Optional

from .types import CVar, CVarFlag, CVarType, CVarValue, DuplicateCVarError


logger = logging.getLogger(__name__)


class CVarRegistry:
    """
    Holds every defined cvar.

    Lookup is by exact, case-sensitive name.
    """

    def __init__(self):
        self._cvars: Dict[str, CVar] = {}
        self._lock = threading.RLock()

    def register(self, cvar: CVar) -> CVar:
        """Register an existing CVar. Duplicate names are rejected."""
        with self._lock:
            if cvar.name in self._cvars:
                raise DuplicateCVarError(f"CVar already defined: {cvar.name}")
            self._cvars[cvar.name] = cvar

        logger.debug(f"Registered cvar: {cvar.name} ({cvar.type.value})")
        return cvar

    def define(
        self,
        name: str,
        cvar_type: CVarType,
        default: CVarValue,
        flags: CVarFlag = CVarFlag.NONE,
        description: str = "",
    ) -> CVar:
        """Create and register a cvar in one step."""
        cvar = CVar(
            name=name,
            type=cvar_type,
            default=default,
            flags=flags,
            description=description,
        )
        return self.register(cvar)

    def get(self, name: str) -> Optional[CVar]:
        """Get a cvar by name."""
        with self._lock:
            return self._cvars.get(name)

    def names(self) -> List[str]:
        """Names of all cvars, in definition order."""
        with self._lock:
            return list(self._cvars)

    def values(self) -> List[CVar]:
        with self._lock:
            return list(self._cvars.values())

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._cvars

    def __len__(self) -> int:
        with self._lock:
            return len(self._cvars)

    def __iter__(self) -> Iterator[CVar]:
        return iter(self.values())
