"""Tests for configuration loading and CLI overrides."""

import json

import pytest

from astro_migration.models import DEFAULT_CONFIG, DEFAULT_SEO
from config_loader import (
    CONFIG_ENV_VAR,
    ConfigError,
    config_from_mapping,
    load_config,
    resolve_runtime_config,
)


def _write_config(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults_without_config_file(self):
        assert load_config() == DEFAULT_CONFIG

    def test_explicit_missing_path_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            load_config("missing.json")

    def test_default_file_in_working_directory(self, tmp_path):
        _write_config(tmp_path / "migrate-astro.json", {"layout_name": "Docs"})
        assert load_config().layout_name == "Docs"

    def test_env_override(self, tmp_path, monkeypatch):
        config_dir = tmp_path / "conf"
        config_dir.mkdir()
        path = _write_config(
            config_dir / "settings.json",
            {"source_dir": "legacy", "target_dir": "../site/src/pages"},
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        config = load_config()

        assert config.source_dir == config_dir / "legacy"
        assert config.target_dir == (tmp_path / "site" / "src" / "pages")

    def test_env_override_missing_raises(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, "nowhere.json")
        with pytest.raises(ConfigError):
            load_config()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Unable to read"):
            load_config(str(path))

    def test_non_object_json(self, tmp_path):
        path = _write_config(tmp_path / "list.json", ["a"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(str(path))


class TestConfigFromMapping:
    def test_partial_default_seo_is_merged(self):
        config = config_from_mapping({"default_seo": {"title": "Docs"}})
        assert config.default_seo.title == "Docs"
        assert config.default_seo.keywords == DEFAULT_SEO.keywords

    def test_exclude_files_become_tuple(self):
        config = config_from_mapping({"exclude_files": ["a.html"]})
        assert config.exclude_files == ("a.html",)

    def test_layouts_dir_resolved(self, tmp_path):
        config = config_from_mapping(
            {"layouts_dir": "layouts"}, base_dir=str(tmp_path)
        )
        assert config.resolved_layouts_dir() == tmp_path / "layouts"

    @pytest.mark.parametrize(
        "data",
        [
            {"unknown": 1},
            {"exclude_files": "test.html"},
            {"extraction_mode": "xpath"},
            {"layout_name": ""},
            {"source_dir": 3},
            {"default_seo": {"author": "x"}},
            {"default_seo": {"title": 1}},
            {"default_seo": "Docs"},
        ],
    )
    def test_invalid_values(self, data):
        with pytest.raises(ConfigError):
            config_from_mapping(data)


class TestResolveRuntimeConfig:
    def test_no_overrides_returns_loaded_config(self):
        assert resolve_runtime_config() == DEFAULT_CONFIG

    def test_cli_overrides(self, tmp_path):
        config = resolve_runtime_config(
            source_dir="legacy",
            target_dir="out/pages",
            extraction_mode="tree",
        )
        assert config.source_dir == tmp_path / "legacy"
        assert config.target_dir == tmp_path / "out" / "pages"
        assert config.extraction_mode == "tree"

    def test_unknown_mode(self):
        with pytest.raises(ConfigError):
            resolve_runtime_config(extraction_mode="xpath")
