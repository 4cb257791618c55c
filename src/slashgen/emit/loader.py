"""Source loading: prompt documents addressed by (category, command_id)."""

from __future__ import annotations

from pathlib import Path

from slashgen.core.config import SOURCE_SUFFIX
from slashgen.core.utils import read_text_exact

from .events import EmitError


def source_path(source_dir: Path, category: str, command_id: str) -> Path:
    return source_dir / category / f"{command_id}{SOURCE_SUFFIX}"


def load_prompt(source_dir: Path, category: str, command_id: str) -> str | None:
    """Return the document's full text, or None if there is none.

    The text is returned unmodified: no front-matter handling, no newline translation.
    """
    path = source_path(source_dir, category, command_id)
    if not path.is_file():
        return None
    try:
        return read_text_exact(path)
    except OSError as e:
        raise EmitError("read", path, e) from e
