"""Registry: the static command catalogue and description lookup."""

from .catalog import (
    COMMANDS,
    DEFAULT_COMMANDS,
    DESCRIPTIONS,
    SKILL_FALLBACK,
    SKILL_REGISTRIES,
)
from .models import DEFAULT_FALLBACK, CommandEntry, Registry

__all__ = [
    "COMMANDS",
    "DEFAULT_COMMANDS",
    "DEFAULT_FALLBACK",
    "DESCRIPTIONS",
    "SKILL_FALLBACK",
    "SKILL_REGISTRIES",
    "CommandEntry",
    "Registry",
]
