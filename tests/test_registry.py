"""Tests for registry: validation, immutability, ordering, description fallback."""

import pytest

from slashgen.registry import (
    COMMANDS,
    DEFAULT_COMMANDS,
    DESCRIPTIONS,
    SKILL_REGISTRIES,
    CommandEntry,
    Registry,
)


@pytest.fixture
def alpha():
    return Registry(
        categories={"alpha": ["foo", "bar"], "beta": ["foo"]},
        descriptions={"alpha/foo": "Do foo"},
    )


class TestCommandEntry:
    def test_key(self):
        assert CommandEntry("prd", "create").key == "prd/create"
        assert str(CommandEntry("prd", "create")) == "prd/create"

    def test_same_id_in_two_categories_is_distinct(self):
        assert CommandEntry("alpha", "foo") != CommandEntry("beta", "foo")


class TestRegistry:
    def test_entries_in_order(self, alpha):
        assert list(alpha.entries()) == [
            CommandEntry("alpha", "foo"),
            CommandEntry("alpha", "bar"),
            CommandEntry("beta", "foo"),
        ]

    def test_len_and_contains(self, alpha):
        assert len(alpha) == 3
        assert CommandEntry("beta", "foo") in alpha
        assert CommandEntry("beta", "bar") not in alpha
        assert "alpha/foo" not in alpha

    def test_categories_are_read_only(self, alpha):
        with pytest.raises(TypeError):
            alpha.categories["gamma"] = ("x",)
        assert alpha.categories["alpha"] == ("foo", "bar")

    def test_descriptions_are_read_only(self, alpha):
        with pytest.raises(TypeError):
            alpha.descriptions["alpha/bar"] = "nope"

    def test_source_dict_mutation_does_not_leak(self):
        cats = {"alpha": ["foo"]}
        reg = Registry(categories=cats)
        cats["alpha"].append("bar")
        assert reg.categories["alpha"] == ("foo",)

    def test_frozen(self, alpha):
        with pytest.raises(AttributeError):
            alpha.fallback = "x"

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="duplicate ids foo"):
            Registry(categories={"alpha": ["foo", "bar", "foo"]})

    def test_blank_category_rejected(self):
        with pytest.raises(ValueError, match="invalid category"):
            Registry(categories={"": ["foo"]})

    def test_slash_in_id_rejected(self):
        with pytest.raises(ValueError, match="invalid command id"):
            Registry(categories={"alpha": ["a/b"]})

    def test_string_instead_of_list_rejected(self):
        with pytest.raises(ValueError, match="expected a list"):
            Registry(categories={"alpha": "foo"})


class TestDescribe:
    def test_explicit_entry(self, alpha):
        assert alpha.describe("alpha", "foo") == "Do foo"

    def test_fallback(self, alpha):
        assert alpha.describe("alpha", "bar") == "Execute bar command"

    def test_key_is_per_category(self, alpha):
        assert alpha.describe("beta", "foo") == "Execute foo command"

    def test_unknown_entry_still_resolves(self, alpha):
        assert alpha.describe("nope", "zzz") == "Execute zzz command"

    def test_custom_fallback(self):
        reg = Registry(categories={"a": ["x"]}, fallback="Execute {name} skill")
        assert reg.describe("a", "x") == "Execute x skill"


class TestCatalog:
    def test_default_commands_shape(self):
        assert list(DEFAULT_COMMANDS.categories) == ["prd", "planning", "prprompts", "automation"]
        assert len(DEFAULT_COMMANDS) == sum(len(v) for v in COMMANDS.values()) == 21

    def test_every_default_command_described(self):
        for entry in DEFAULT_COMMANDS.entries():
            assert entry.key in DESCRIPTIONS
            assert "\n" not in DEFAULT_COMMANDS.describe(entry.category, entry.command_id)

    def test_no_orphan_descriptions(self):
        keys = {e.key for e in DEFAULT_COMMANDS.entries()}
        assert set(DESCRIPTIONS) <= keys

    def test_skill_registries_per_host(self):
        assert set(SKILL_REGISTRIES) == {"gemini", "qwen"}
        qwen_core = SKILL_REGISTRIES["qwen"].categories["prprompts-core"]
        gemini_core = SKILL_REGISTRIES["gemini"].categories["prprompts-core"]
        assert "prd-creator" in qwen_core
        assert "prd-creator" not in gemini_core

    def test_skill_fallback(self):
        assert SKILL_REGISTRIES["qwen"].describe("automation", "qa-auditor") == (
            "Execute qa-auditor skill"
        )
