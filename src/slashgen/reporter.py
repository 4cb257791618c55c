"""Rich console rendering of pipeline events."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from slashgen.core.config import MANIFEST_SUFFIX, Config
from slashgen.core.utils import plural, short_path, slash_command
from slashgen.emit import EmitListener, RunReport
from slashgen.registry import CommandEntry

console = Console(emoji=False)


class ConsoleReporter(EmitListener):
    """Prints category headers, per-entry lines and the run summary.

    ``kind`` is ``"command"`` or ``"skill"``; skill invocations carry a ``skills``
    prefix on the host.
    """

    def __init__(self, config: Config, kind: str = "command", out: Console | None = None):
        self.config = config
        self.kind = kind
        self.console = out or console

    # ── Events ───────────────────────────────────────────────────────

    def on_category_started(self, category: str, directory: Path) -> None:
        self.console.print(escape(f"📁 Category: {category}"))

    def on_entry_written(self, entry: CommandEntry, path: Path) -> None:
        self.console.print(escape(f"  ✅ {path.name}"))

    def on_entry_skipped(self, entry: CommandEntry, reason: str) -> None:
        self.console.print(escape(f"⚠️  Skipping {entry.key} - {reason}"), style="yellow")

    def on_category_finished(self, category: str) -> None:
        self.console.print()

    def on_run_complete(self, report: RunReport) -> None:
        out = self.console
        out.print(
            f"✨ Generated {report.total} TOML {self.kind} "
            f"{'file' if report.total == 1 else 'files'}!"
        )
        if report.has_skips:
            out.print(f"   {len(report.skipped)} skipped", style="yellow")
        out.print()

        groups = report.groups()
        if groups:
            out.print("📦 Files created in:")
            for category, paths in groups.items():
                rel = short_path(report.output_dir / category, self.config.root)
                out.print(escape(f"   {rel}/*{MANIFEST_SUFFIX} ({plural(len(paths), 'file')})"))
            out.print()

            out.print(f"🎯 Usage in {self.config.host_name}:")
            for example in self.examples(report):
                out.print(escape(f"   {example}"))
            out.print()

        self._print_next_steps(report)

    # ── Summary helpers ──────────────────────────────────────────────

    def examples(self, report: RunReport) -> list[str]:
        """One invocation string per category that produced a manifest."""
        prefix = ("skills",) if self.kind == "skill" else ()
        seen: set[str] = set()
        out: list[str] = []
        for w in report.written:
            if w.entry.category in seen:
                continue
            seen.add(w.entry.category)
            parts = (*prefix, w.entry.category, w.entry.command_id)
            out.append(slash_command(self.config.host, *parts))
        return out

    def _print_next_steps(self, report: RunReport) -> None:
        if not report.written:
            return
        out = self.console
        rel = short_path(report.output_dir, self.config.root)
        host_dir = f"~/.{self.config.host}/commands/"
        if self.kind == "skill":
            host_dir += "skills/"
        out.print("📋 Next steps:")
        out.print(escape(f"   1. Copy to user config: cp -r {rel}/* {host_dir}"))
        out.print(f"   2. Restart {self.config.host_name}")
        out.print("   3. Verify with: /help")
        if self.kind == "skill" and self.config.host == "gemini":
            out.print()
            out.print("💡 With inline arguments (Gemini feature):")
            first = report.written[0].entry
            example = slash_command("gemini", "skills", first.category, first.command_id)
            out.print(escape(f"   {example} <args>"))
