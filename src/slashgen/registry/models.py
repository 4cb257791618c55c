"""Registry data models: CommandEntry, Registry."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_FALLBACK = "Execute {name} command"


@dataclass(frozen=True)
class CommandEntry:
    """One (category, command_id) pair the build tries to materialize."""

    category: str
    command_id: str

    @property
    def key(self) -> str:
        return f"{self.category}/{self.command_id}"

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class Registry:
    """Immutable catalogue of categories, their ordered command ids and descriptions.

    ``categories`` maps a category name to its command ids in build order.
    ``descriptions`` is keyed by ``"category/command_id"`` and need not cover every
    entry; misses resolve to ``fallback`` formatted with the command id as ``name``.
    """

    categories: Mapping[str, tuple[str, ...]]
    descriptions: Mapping[str, str] = field(default_factory=dict)
    fallback: str = DEFAULT_FALLBACK

    def __post_init__(self) -> None:
        frozen: dict[str, tuple[str, ...]] = {}
        for category, command_ids in self.categories.items():
            if not category or "/" in category:
                raise ValueError(f"invalid category name: {category!r}")
            if isinstance(command_ids, str):
                raise ValueError(f"category {category!r}: expected a list of ids, got a string")
            ids = tuple(command_ids)
            for command_id in ids:
                if not command_id or "/" in command_id:
                    raise ValueError(f"category {category!r}: invalid command id {command_id!r}")
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            if dupes:
                raise ValueError(f"category {category!r}: duplicate ids {', '.join(dupes)}")
            frozen[category] = ids
        object.__setattr__(self, "categories", MappingProxyType(frozen))
        object.__setattr__(self, "descriptions", MappingProxyType(dict(self.descriptions)))

    def entries(self) -> Iterator[CommandEntry]:
        """Yield every entry, categories first, in registry order."""
        for category, command_ids in self.categories.items():
            for command_id in command_ids:
                yield CommandEntry(category, command_id)

    def describe(self, category: str, command_id: str) -> str:
        """One-line description for an entry; never fails."""
        key = f"{category}/{command_id}"
        if key in self.descriptions:
            return self.descriptions[key]
        return self.fallback.format(name=command_id)

    def __len__(self) -> int:
        return sum(len(ids) for ids in self.categories.values())

    def __contains__(self, entry: object) -> bool:
        if not isinstance(entry, CommandEntry):
            return False
        return entry.command_id in self.categories.get(entry.category, ())
