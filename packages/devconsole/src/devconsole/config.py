"""Console configuration, read from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes")


@dataclass
class ConsoleConfig:
    """Configuration for a console front end."""

    log_level: str = "WARNING"
    cvar_file: Optional[str] = None  # YAML with definitions and saved values
    prompt: str = "> "
    save_on_exit: bool = False

    @classmethod
    def from_env(cls) -> "ConsoleConfig":
        """
        Build a config from DEVCONSOLE_* environment variables.

        DEVCONSOLE_LOG_LEVEL, DEVCONSOLE_CVAR_FILE, DEVCONSOLE_PROMPT,
        DEVCONSOLE_SAVE_ON_EXIT.
        """
        return cls(
            log_level=os.getenv("DEVCONSOLE_LOG_LEVEL", "WARNING").upper(),
            cvar_file=os.getenv("DEVCONSOLE_CVAR_FILE") or None,
            prompt=os.getenv("DEVCONSOLE_PROMPT", "> "),
            save_on_exit=_env_flag("DEVCONSOLE_SAVE_ON_EXIT"),
        )


def configure_logging(config: ConsoleConfig) -> None:
    """Configure root logging at the configured level."""
    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
