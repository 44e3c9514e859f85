"""
Tests for configuration loading and the environment check
(tokenlist_tools/config.py, tokenlist_tools/check_env.py)

Run: python -m pytest tests/test_config.py -q
"""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from tokenlist_tools import check_env
from tokenlist_tools.config import (
    LOGO_SIZE_LIMITS,
    config_from_args,
    find_repo_root,
    load_config,
)
from tokenlist_tools.errors import ConfigError

REPO_ROOT = Path(__file__).resolve().parent.parent


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------

class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        cfg = load_config(tmp_path)
        assert cfg.root == tmp_path.resolve()
        assert cfg.list_file == tmp_path.resolve() / "data" / "tokenlist.json"
        assert cfg.schema_file == tmp_path.resolve() / "schema" / "tokenlist.schema.json"
        assert cfg.dist_path == tmp_path.resolve() / "dist"
        assert cfg.logo_max_bytes == LOGO_SIZE_LIMITS
        assert cfg.cdn_package_name == "token-list"
        assert cfg.cdn_version == "latest"

    def test_defaults_not_shared(self, tmp_path):
        a = load_config(tmp_path)
        a.logo_max_bytes["png"] = 1
        assert load_config(tmp_path).logo_max_bytes["png"] == 50 * 1024

    def test_shipped_config_matches_defaults(self):
        cfg = load_config(REPO_ROOT)
        assert cfg.logo_max_bytes == LOGO_SIZE_LIMITS
        assert cfg.list_file.is_file()
        assert cfg.schema_file.is_file()

    def test_overrides(self, tmp_path):
        (tmp_path / "tokenlist.yaml").write_text(
            "paths:\n"
            "  list: lists/main.json\n"
            "logos:\n"
            "  max_bytes:\n"
            "    .PNG: 1024\n"
            "cdn:\n"
            "  version: 3.1.0\n",
            encoding="utf-8",
        )
        cfg = load_config(tmp_path)
        assert cfg.list_file == tmp_path.resolve() / "lists" / "main.json"
        assert cfg.logo_max_bytes["png"] == 1024
        assert cfg.logo_max_bytes["svg"] == 25 * 1024
        assert cfg.cdn_version == "3.1.0"

    def test_empty_file(self, tmp_path):
        (tmp_path / "tokenlist.yaml").write_text("", encoding="utf-8")
        assert load_config(tmp_path).list_path == "data/tokenlist.json"

    @pytest.mark.parametrize("text", [
        "logos:\n  max_bytes:\n    gif: 100\n",
        "logos:\n  max_bytes:\n    png: -5\n",
        "logos:\n  max_bytes:\n    png: big\n",
        "paths: [a, b]\n",
        "- just\n- a list\n",
        "paths: {list: [unclosed\n",
    ])
    def test_invalid(self, tmp_path, text):
        (tmp_path / "tokenlist.yaml").write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(tmp_path)


# ---------------------------------------------------------------------------
# Repo root discovery
# ---------------------------------------------------------------------------

class TestFindRepoRoot:
    def test_from_nested_dir(self, tmp_path):
        (tmp_path / "tokenlist.yaml").write_text("{}\n", encoding="utf-8")
        nested = tmp_path / "images" / "1"
        nested.mkdir(parents=True)
        assert find_repo_root(nested) == tmp_path.resolve()

    def test_schema_marker(self, tmp_path):
        (tmp_path / "schema").mkdir()
        (tmp_path / "schema" / "tokenlist.schema.json").write_text("{}", encoding="utf-8")
        assert find_repo_root(tmp_path / "schema") == tmp_path.resolve()

    def test_config_from_explicit_root(self, tmp_path):
        assert config_from_args(str(tmp_path)).root == tmp_path.resolve()

    def test_config_from_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "tokenlist.yaml").write_text("{}\n", encoding="utf-8")
        (tmp_path / "data").mkdir()
        monkeypatch.chdir(tmp_path / "data")
        assert config_from_args(None).root == tmp_path.resolve()


# ---------------------------------------------------------------------------
# check_env
# ---------------------------------------------------------------------------

class TestCheckEnv:
    def test_python_version(self):
        assert check_env.check_python_version((3, 12, 1)) == []
        assert check_env.check_python_version((3, 10, 0))

    def test_check_import(self):
        assert check_env.check_import("json", "json") == (True, None)
        ok, msg = check_env.check_import("no_such_module_for_tokenlist", "nothing")
        assert not ok
        assert "no_such_module_for_tokenlist" in msg

    def test_checksum_backend(self):
        assert check_env.check_checksum_backend() is None

    def test_repo_passes(self, capsys):
        assert check_env.main(["--root", str(REPO_ROOT)]) == 0
        assert "ENV CHECK: PASS" in capsys.readouterr().out

    def test_missing_schema_fails(self, tmp_path, capsys):
        assert check_env.main(["--root", str(tmp_path)]) == 2
        assert "Schema file not found" in capsys.readouterr().out
