"""Pipeline results and the listener interface used to report progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from slashgen.registry import CommandEntry


class EmitError(Exception):
    """Fatal I/O failure on a specific path. Aborts the run."""

    def __init__(self, action: str, path: Path, cause: OSError):
        self.action = action
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot {action} {path}: {reason}")


@dataclass(frozen=True)
class Written:
    entry: CommandEntry
    path: Path


@dataclass(frozen=True)
class Skipped:
    entry: CommandEntry
    reason: str


@dataclass
class RunReport:
    """Outcome of one run: written manifests and skipped entries, in order."""

    output_dir: Path
    written: list[Written] = field(default_factory=list)
    skipped: list[Skipped] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.written)

    @property
    def has_skips(self) -> bool:
        return bool(self.skipped)

    def groups(self) -> dict[str, list[Path]]:
        """Written manifest paths grouped by category, in write order."""
        out: dict[str, list[Path]] = {}
        for w in self.written:
            out.setdefault(w.entry.category, []).append(w.path)
        return out


class EmitListener:
    """No-op base. Subclass and override the hooks you care about."""

    def on_category_started(self, category: str, directory: Path) -> None:
        pass

    def on_entry_written(self, entry: CommandEntry, path: Path) -> None:
        pass

    def on_entry_skipped(self, entry: CommandEntry, reason: str) -> None:
        pass

    def on_category_finished(self, category: str) -> None:
        pass

    def on_run_complete(self, report: RunReport) -> None:
        pass
