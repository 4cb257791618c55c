"""Emission pipeline: load -> describe -> serialize -> write, per registry entry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from slashgen.core.config import MANIFEST_SUFFIX
from slashgen.core.utils import ensure_dir, write_text_exact
from slashgen.manifest import serialize
from slashgen.registry import DEFAULT_COMMANDS, CommandEntry, Registry

from .events import EmitError, EmitListener, RunReport, Skipped, Written
from .loader import load_prompt

if TYPE_CHECKING:
    from slashgen.core.config import Config


@dataclass(frozen=True)
class Loaded:
    """A source that is ready to serialize. ``description=None`` defers to the registry."""

    prompt: str
    description: str | None = None


@dataclass(frozen=True)
class Skip:
    reason: str


Source = Callable[[CommandEntry], "Loaded | Skip"]


def manifest_path(output_dir: Path, entry: CommandEntry) -> Path:
    return output_dir / entry.category / f"{entry.command_id}{MANIFEST_SUFFIX}"


def emit(
    registry: Registry,
    source: Source,
    output_dir: Path,
    listener: EmitListener | None = None,
) -> RunReport:
    """Process every registry entry once, in order.

    Missing sources are skipped and reported. I/O failures on directory creation or
    writing (and the source's own read errors) surface as EmitError and end the run;
    files already written stay.
    """
    listener = listener or EmitListener()
    report = RunReport(output_dir=output_dir)

    for category, command_ids in registry.categories.items():
        category_dir = output_dir / category
        try:
            ensure_dir(category_dir)
        except OSError as e:
            raise EmitError("create directory", category_dir, e) from e
        listener.on_category_started(category, category_dir)

        for command_id in command_ids:
            entry = CommandEntry(category, command_id)
            result = source(entry)
            if isinstance(result, Skip):
                report.skipped.append(Skipped(entry, result.reason))
                listener.on_entry_skipped(entry, result.reason)
                continue

            description = result.description or registry.describe(category, command_id)
            path = manifest_path(output_dir, entry)
            try:
                write_text_exact(path, serialize(description, result.prompt))
            except OSError as e:
                raise EmitError("write", path, e) from e
            report.written.append(Written(entry, path))
            listener.on_entry_written(entry, path)

        listener.on_category_finished(category)

    listener.on_run_complete(report)
    return report


def command_source(source_dir: Path) -> Source:
    """Source reading ``<source_dir>/<category>/<id>.md``."""

    def _load(entry: CommandEntry) -> Loaded | Skip:
        text = load_prompt(source_dir, entry.category, entry.command_id)
        if text is None:
            return Skip("missing .md file")
        return Loaded(prompt=text)

    return _load


def emit_commands(
    config: Config,
    registry: Registry = DEFAULT_COMMANDS,
    listener: EmitListener | None = None,
) -> RunReport:
    """Build the command catalogue under ``config.output_dir``."""
    return emit(registry, command_source(config.commands_dir), config.output_dir, listener)
