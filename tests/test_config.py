"""Tests for config: defaults, host validation, derived paths."""

from pathlib import Path

import pytest

from slashgen.core.config import HOSTS, Config, load_config


class TestConfigDefaults:
    def test_default_root_is_cwd(self):
        assert Config().root == Path.cwd()

    def test_default_host(self):
        c = Config()
        assert c.host == "gemini"
        assert c.host_name == "Gemini CLI"

    def test_flags_off(self):
        c = Config()
        assert c.strict is False
        assert c.verbose is False

    def test_unknown_host(self):
        with pytest.raises(ValueError, match="unknown host"):
            Config(host="copilot")


class TestPaths:
    def test_commands_share_one_tree(self, tmp_path):
        c = Config(root=tmp_path)
        assert c.commands_dir == tmp_path / ".gemini" / "commands"
        assert c.output_dir == c.commands_dir

    def test_commands_ignore_host(self, tmp_path):
        c = Config(root=tmp_path, host="qwen")
        assert c.commands_dir == tmp_path / ".gemini" / "commands"

    def test_skill_dirs(self, tmp_path):
        c = Config(root=tmp_path, host="qwen")
        assert c.skills_source_dir == tmp_path / ".claude" / "skills"
        assert c.skills_output_dir == tmp_path / ".qwen" / "commands" / "skills"

    def test_manifest_dirs_cover_all_hosts(self, tmp_path):
        dirs = Config(root=tmp_path).manifest_dirs
        assert len(dirs) == len(HOSTS)
        assert tmp_path / ".qwen" / "commands" in dirs

    def test_root_string_coerced(self, tmp_path):
        assert Config(root=str(tmp_path)).root == tmp_path


class TestLoadConfig:
    def test_defaults(self):
        c = load_config()
        assert c.root == Path.cwd()
        assert c.host == "gemini"

    def test_cli_args_applied(self, tmp_path):
        c = load_config(root=tmp_path, host="qwen", strict=True, verbose=True)
        assert c.root == tmp_path
        assert c.host == "qwen"
        assert c.strict is True
        assert c.verbose is True

    def test_bad_host(self):
        with pytest.raises(ValueError):
            load_config(host="nope")
