"""TOML manifest serialization: escape/unescape, serialize, parse, tree check.

Escaping grammar for the prompt block, applied in order:

1. ``\\`` -> ``\\\\``
2. each non-overlapping ``\"\"\"`` (left to right) -> ``\"\"\\\"``
3. control characters TOML forbids in basic strings -> ``\\uXXXX``;
   a carriage return not followed by a line feed -> ``\\r``

After step 1 every backslash in the output starts exactly one escape sequence, so
``unescape`` is a plain left-to-right scan and ``unescape(escape(s)) == s`` for every
string, including ones that already contain escaped-looking quote runs. No run of
three unescaped quotes survives, so the block cannot be closed early.
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass
from pathlib import Path

from slashgen.core.config import MANIFEST_SUFFIX
from slashgen.core.utils import read_text_exact

DELIMITER = '"""'
ESCAPED_DELIMITER = '""\\"'

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]|\r(?!\n)")
_ESCAPE_RE = re.compile(r"\\(u[0-9A-Fa-f]{4}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"\\": "\\", '"': '"', "r": "\r"}


class ManifestError(ValueError):
    """A manifest could not be parsed or is missing a field."""


def _escape_control(m: re.Match) -> str:
    ch = m.group(0)
    if ch == "\r":
        return "\\r"
    return f"\\u{ord(ch):04X}"


def escape(body: str) -> str:
    """Escape *body* for embedding in a triple-quoted TOML basic string."""
    text = body.replace("\\", "\\\\")
    text = text.replace(DELIMITER, ESCAPED_DELIMITER)
    return _CONTROL_RE.sub(_escape_control, text)


def unescape(text: str) -> str:
    """Inverse of ``escape``. Raises ManifestError on an unknown escape sequence."""

    def _replace(m: re.Match) -> str:
        seq = m.group(1)
        if len(seq) == 5:
            return chr(int(seq[1:], 16))
        try:
            return _SIMPLE_ESCAPES[seq]
        except KeyError:
            raise ManifestError(f"invalid escape sequence: \\{seq}") from None

    return _ESCAPE_RE.sub(_replace, text)


def quote(value: str) -> str:
    """Single-line TOML basic string. Identity on plain catalogue descriptions."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{_CONTROL_RE.sub(_escape_control, escaped)}"'


def serialize(description: str, prompt_body: str) -> str:
    """Render a manifest: a description line, then the escaped prompt block."""
    return f'description = {quote(description)}\n\nprompt = """\n{escape(prompt_body)}\n"""\n'


@dataclass(frozen=True)
class ManifestDocument:
    description: str
    prompt: str

    def render(self) -> str:
        return serialize(self.description, self.prompt)


def parse_manifest(text: str) -> ManifestDocument:
    """Read a manifest back with a real TOML parser.

    The block layout adds one line feed before the closing delimiter; it is
    stripped so the result's ``prompt`` equals the body that was serialized.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"invalid TOML: {e}") from e
    description = data.get("description")
    prompt = data.get("prompt")
    if not isinstance(description, str):
        raise ManifestError("missing string field 'description'")
    if not isinstance(prompt, str):
        raise ManifestError("missing string field 'prompt'")
    if prompt.endswith("\n"):
        prompt = prompt[:-1]
    return ManifestDocument(description=description, prompt=prompt)


def check_tree(directory: Path) -> tuple[int, list[tuple[Path, str]]]:
    """Parse every manifest under *directory*.

    Returns ``(checked, failures)`` where each failure is ``(path, reason)``.
    """
    if not directory.is_dir():
        return 0, []
    checked = 0
    failures: list[tuple[Path, str]] = []
    for path in sorted(directory.rglob(f"*{MANIFEST_SUFFIX}")):
        checked += 1
        try:
            parse_manifest(read_text_exact(path, errors="strict"))
        except ManifestError as e:
            failures.append((path, str(e)))
        except UnicodeDecodeError as e:
            failures.append((path, f"not UTF-8: {e.reason}"))
    return checked, failures
