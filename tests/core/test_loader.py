# tests/core/test_loader.py
from __future__ import annotations

import os

import pytest

from wt.catalog.core.loader import import_attr, load_yaml_files, substitute_env_vars


class TestImportAttr:
    def test_import_valid_path(self):
        assert import_attr("os.path:join") is os.path.join

    def test_import_invalid_format_no_colon(self):
        with pytest.raises(ValueError, match="expected 'module:attr'"):
            import_attr("os.path.join")

    def test_import_nonexistent_module(self):
        with pytest.raises(ImportError):
            import_attr("nonexistent.module:attr")

    def test_import_nonexistent_attr(self):
        with pytest.raises(AttributeError):
            import_attr("os.path:nonexistent_function")


class TestSubstituteEnvVars:
    def test_substitute_simple_var(self, monkeypatch):
        monkeypatch.setenv("WT_TEST_VAR", "hello")
        assert substitute_env_vars("${WT_TEST_VAR}") == "hello"

    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("WT_MISSING_VAR", raising=False)
        assert substitute_env_vars("${WT_MISSING_VAR:-fallback}") == "fallback"

    def test_env_wins_over_default(self, monkeypatch):
        monkeypatch.setenv("WT_TEST_VAR", "from_env")
        assert substitute_env_vars("${WT_TEST_VAR:-fallback}") == "from_env"

    def test_missing_var_no_default_raises(self, monkeypatch):
        monkeypatch.delenv("WT_MISSING_VAR", raising=False)
        with pytest.raises(ValueError, match="not set"):
            substitute_env_vars("${WT_MISSING_VAR}")

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv("WT_HOST", "index.local")

        result = substitute_env_vars(
            {"url": "http://${WT_HOST}:3000", "list": ["${WT_HOST}", 5], "n": 1}
        )

        assert result == {
            "url": "http://index.local:3000",
            "list": ["index.local", 5],
            "n": 1,
        }


class TestLoadYamlFiles:
    def test_no_match_returns_empty(self, tmp_path):
        assert load_yaml_files([str(tmp_path / "*.yaml")]) == []

    def test_loads_sorted(self, tmp_path):
        (tmp_path / "b.yaml").write_text("name: b\n")
        (tmp_path / "a.yaml").write_text("name: a\n")

        docs = load_yaml_files([str(tmp_path / "*.yaml")])

        assert [d["name"] for d in docs] == ["a", "b"]

    def test_empty_file_is_empty_mapping(self, tmp_path):
        (tmp_path / "empty.yaml").write_text("")
        assert load_yaml_files([str(tmp_path / "empty.yaml")]) == [{}]

    def test_non_mapping_rejected(self, tmp_path):
        (tmp_path / "list.yaml").write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_yaml_files([str(tmp_path / "list.yaml")])
