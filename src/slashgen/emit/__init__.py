"""Emit: run a registry through loading, serialization and file writes."""

from .events import EmitError, EmitListener, RunReport, Skipped, Written
from .loader import load_prompt, source_path
from .pipeline import Loaded, Skip, command_source, emit, emit_commands, manifest_path
from .skills import build_skill_prompt, emit_skills, load_skill, smart_defaults_section

__all__ = [
    "EmitError",
    "EmitListener",
    "Loaded",
    "RunReport",
    "Skip",
    "Skipped",
    "Written",
    "build_skill_prompt",
    "command_source",
    "emit",
    "emit_commands",
    "emit_skills",
    "load_prompt",
    "load_skill",
    "manifest_path",
    "smart_defaults_section",
    "source_path",
]
