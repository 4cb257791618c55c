"""Configuration: project root, target host, derived paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# host id -> display name
HOSTS = {
    "gemini": "Gemini CLI",
    "qwen": "Qwen Code",
}

# Command sources and their manifests share one tree, as the Gemini CLI expects.
COMMANDS_HOST = "gemini"

SOURCE_SUFFIX = ".md"
MANIFEST_SUFFIX = ".toml"


@dataclass
class Config:
    root: Path = field(default_factory=Path.cwd)
    host: str = COMMANDS_HOST
    strict: bool = False  # exit non-zero when any entry was skipped
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.host not in HOSTS:
            raise ValueError(f"unknown host {self.host!r} (expected one of: {', '.join(HOSTS)})")
        self.root = Path(self.root)

    @property
    def host_name(self) -> str:
        return HOSTS[self.host]

    @property
    def commands_dir(self) -> Path:
        """Where command prompt documents live."""
        return self.root / f".{COMMANDS_HOST}" / "commands"

    @property
    def output_dir(self) -> Path:
        """Where command manifests are written."""
        return self.commands_dir

    @property
    def skills_source_dir(self) -> Path:
        return self.root / ".claude" / "skills"

    @property
    def skills_output_dir(self) -> Path:
        return self.root / f".{self.host}" / "commands" / "skills"

    @property
    def manifest_dirs(self) -> list[Path]:
        """Every host command tree under root that may hold manifests."""
        return [self.root / f".{host}" / "commands" for host in HOSTS]


def load_config(
    root: str | Path | None = None,
    host: str | None = None,
    strict: bool = False,
    verbose: bool = False,
) -> Config:
    """Build config with priority: CLI args > defaults.

    Raises ValueError for an unknown host.
    """
    return Config(
        root=Path(root).expanduser() if root else Path.cwd(),
        host=host or COMMANDS_HOST,
        strict=strict,
        verbose=verbose,
    )
