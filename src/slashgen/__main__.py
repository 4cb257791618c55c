"""CLI entry point: build command/skill manifests, check emitted trees."""

from __future__ import annotations

import sys

import click
from rich.markup import escape

from . import __version__
from .core.config import HOSTS, load_config
from .core.utils import plural, short_path
from .emit import EmitError, RunReport, emit_commands, emit_skills
from .manifest import check_tree
from .reporter import ConsoleReporter, console

# Exit status when --strict is set and at least one entry was skipped.
EXIT_SKIPPED = 2


def _finish(config, report: RunReport) -> None:
    if config.strict and report.has_skips:
        sys.exit(EXIT_SKIPPED)


def _fail(config, e: Exception) -> None:
    console.print(escape(f"error: {e}"), style="bold")
    if config.verbose:
        console.print_exception()
    sys.exit(1)


def _strict_option(f):
    return click.option(
        "--strict", is_flag=True, help=f"Exit with status {EXIT_SKIPPED} if any entry is skipped"
    )(f)


def _root_option(f):
    return click.option(
        "--root",
        type=click.Path(file_okay=False),
        default=None,
        help="Project root (default: current directory)",
    )(f)


def _verbose_option(f):
    return click.option("--verbose", "-v", is_flag=True, help="Show tracebacks on errors")(f)


# ── Commands ────────────────────────────────────────────────────────


@click.command()
@_root_option
@_strict_option
@_verbose_option
@click.version_option(__version__, prog_name="slashgen")
def _click_main(root: str | None, strict: bool, verbose: bool):
    """Generate TOML slash-command manifests from markdown commands."""
    config = load_config(root=root, strict=strict, verbose=verbose)
    console.print(f"🚀 Generating {config.host_name} TOML Command Files...")
    console.print()
    try:
        report = emit_commands(config, listener=ConsoleReporter(config, kind="command"))
    except EmitError as e:
        _fail(config, e)
    _finish(config, report)


@click.command()
@click.option(
    "--host",
    type=click.Choice(list(HOSTS)),
    default="gemini",
    show_default=True,
    help="Target CLI host",
)
@_root_option
@_strict_option
@_verbose_option
def _skills_main(host: str, root: str | None, strict: bool, verbose: bool):
    """Generate TOML slash-command manifests from skill directories."""
    config = load_config(root=root, host=host, strict=strict, verbose=verbose)
    console.print(f"🚀 Generating {config.host_name} TOML Slash Command Files...")
    console.print()
    try:
        report = emit_skills(config, listener=ConsoleReporter(config, kind="skill"))
    except EmitError as e:
        _fail(config, e)
    _finish(config, report)


@click.command()
@_root_option
def _check_main(root: str | None):
    """Parse every emitted manifest and report the ones that fail."""
    config = load_config(root=root)
    total = 0
    failed = 0
    for directory in config.manifest_dirs:
        checked, failures = check_tree(directory)
        if not checked:
            continue
        total += checked
        failed += len(failures)
        rel = short_path(directory, config.root)
        console.print(escape(f"{rel}: {plural(checked, 'manifest')}"))
        for path, reason in failures:
            console.print(escape(f"  ✗ {short_path(path, config.root)}: {reason}"), style="red")

    if not total:
        console.print("no manifests found", style="dim")
        return
    if failed:
        console.print(f"{plural(failed, 'invalid manifest')}", style="bold")
        sys.exit(1)
    console.print("[green]all manifests are valid[/green]")


def main():
    """True entry point: dispatches subcommands before click."""
    if len(sys.argv) > 1 and sys.argv[1] == "skills":
        _skills_main(args=sys.argv[2:], prog_name="slashgen skills")
        return
    if len(sys.argv) > 1 and sys.argv[1] == "check":
        _check_main(args=sys.argv[2:], prog_name="slashgen check")
        return
    _click_main()


if __name__ == "__main__":
    main()
