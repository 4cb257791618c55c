"""Exact text I/O, directory bootstrapping, display helpers."""

from __future__ import annotations

from pathlib import Path


def read_text_exact(path: Path, errors: str = "replace") -> str:
    """Read UTF-8 text without newline translation. Undecodable bytes become U+FFFD."""
    with open(path, encoding="utf-8", errors=errors, newline="") as f:
        return f.read()


def write_text_exact(path: Path, text: str) -> None:
    """Write UTF-8 text without newline translation, replacing any existing file."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def ensure_dir(path: Path) -> None:
    """Create *path* and its parents."""
    path.mkdir(parents=True, exist_ok=True)


def short_path(p: Path, root: Path | None = None) -> str:
    """Return *p* relative to *root* (default: cwd), or unchanged when outside it."""
    root = root or Path.cwd()
    try:
        return str(p.relative_to(root))
    except ValueError:
        return str(p)


def slash_command(host: str, *parts: str) -> str:
    """Invocation string for a manifest on *host* (e.g. '/prd:create')."""
    sep = "/" if host == "qwen" else ":"
    return "/" + sep.join(parts)


def plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"
