"""Manifest: TOML slash-command document format."""

from .toml import (
    DELIMITER,
    ESCAPED_DELIMITER,
    ManifestDocument,
    ManifestError,
    check_tree,
    escape,
    parse_manifest,
    quote,
    serialize,
    unescape,
)

__all__ = [
    "DELIMITER",
    "ESCAPED_DELIMITER",
    "ManifestDocument",
    "ManifestError",
    "check_tree",
    "escape",
    "parse_manifest",
    "quote",
    "serialize",
    "unescape",
]
