#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for configuration loading and option building."""
import json

import pytest

from wiki2html.config import (
    build_options,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    merge_configs,
)
from wiki2html.exceptions import ConfigurationError


@pytest.mark.unit
class TestLoadConfigFile:
    """Test reading the supported file formats."""

    def test_toml(self, tmp_path) -> None:
        """Test a dedicated TOML file."""
        path = tmp_path / ".wiki2html.toml"
        path.write_text('[pipeline]\nstartpage_path = "/Home"\n', encoding="utf-8")
        assert load_config_file(path) == {"pipeline": {"startpage_path": "/Home"}}

    def test_yaml(self, tmp_path) -> None:
        """Test a YAML file, including an empty one."""
        path = tmp_path / "wiki.yaml"
        path.write_text("html:\n  generate_edit_links: false\n", encoding="utf-8")
        assert load_config_file(path) == {"html": {"generate_edit_links": False}}

        empty = tmp_path / "empty.yml"
        empty.write_text("", encoding="utf-8")
        assert load_config_file(empty) == {}

    def test_json(self, tmp_path) -> None:
        """Test a JSON file given as a string path."""
        path = tmp_path / "wiki.json"
        path.write_text(json.dumps({"shell": {"program_name": "Docs"}}), encoding="utf-8")
        assert load_config_file(str(path)) == {"shell": {"program_name": "Docs"}}

    def test_pyproject(self, tmp_path) -> None:
        """Test that only the tool table of a pyproject.toml is returned."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.wiki2html.pipeline]\nmax_include_depth = 2\n', encoding="utf-8")
        assert load_config_file(path) == {"pipeline": {"max_include_depth": 2}}

    @pytest.mark.parametrize(
        "filename,content",
        [
            ("bad.toml", "[pipeline\n"),
            ("bad.json", "{not json"),
            ("list.json", "[1, 2]"),
            ("bad.yaml", "a: [1, 2\n"),
            ("list.yaml", "- a\n"),
            ("config.ini", "[html]\n"),
        ],
    )
    def test_invalid_files(self, tmp_path, filename, content) -> None:
        """Test that broken or unsupported files raise ConfigurationError."""
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(path)
        assert exc_info.value.config_path == str(path)

    def test_missing_and_directory(self, tmp_path) -> None:
        """Test paths that are not readable files."""
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config_file(tmp_path / "missing.toml")
        with pytest.raises(ConfigurationError, match="not a file"):
            load_config_file(tmp_path)


@pytest.mark.unit
class TestDiscovery:
    """Test configuration discovery and priority."""

    def test_dedicated_file_wins_over_pyproject(self, tmp_path) -> None:
        """Test the lookup order inside one directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.wiki2html.html]\nescape_html = true\n", encoding="utf-8")
        (tmp_path / ".wiki2html.yaml").write_text("html: {}\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == (tmp_path / ".wiki2html.yaml").resolve()

    def test_search_walks_up(self, tmp_path) -> None:
        """Test that parent directories are searched and foreign pyprojects are skipped."""
        (tmp_path / ".wiki2html.json").write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        (nested / "pyproject.toml").write_text('[project]\nname = "other"\n', encoding="utf-8")
        assert find_config_in_parents(nested) == (tmp_path / ".wiki2html.json").resolve()

    def test_priority(self, tmp_path, monkeypatch) -> None:
        """Test explicit path before environment path before discovery."""
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"pipeline": {"startpage_path": "/A"}}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"pipeline": {"startpage_path": "/B"}}', encoding="utf-8")

        assert load_config_with_priority(str(explicit), str(env))["pipeline"]["startpage_path"] == "/A"
        assert load_config_with_priority(None, str(env))["pipeline"]["startpage_path"] == "/B"

        empty_dir = tmp_path / "empty"
        empty_dir.mkdir()
        monkeypatch.chdir(empty_dir)
        monkeypatch.setattr("wiki2html.config.find_config_in_parents", lambda: None)
        assert load_config_with_priority() == {}

    def test_merge_is_deep(self) -> None:
        """Test that nested tables are merged key by key."""
        base = {"html": {"escape_html": True, "generate_edit_links": True}, "shell": {"program_name": "A"}}
        override = {"html": {"generate_edit_links": False}, "messages": {"x": "y"}}
        assert merge_configs(base, override) == {
            "html": {"escape_html": True, "generate_edit_links": False},
            "shell": {"program_name": "A"},
            "messages": {"x": "y"},
        }
        assert base["html"]["generate_edit_links"] is True


@pytest.mark.unit
class TestBuildOptions:
    """Test turning mappings into option objects."""

    def test_defaults(self) -> None:
        """Test that every section has defaults."""
        config = build_options({})
        assert config.html.generate_edit_links is True
        assert config.pipeline.startpage_path == "/Index"
        assert config.shell.stylesheets == ()
        assert config.messages.get_message("html.search") == "Search"

    def test_sections(self) -> None:
        """Test values from all four sections."""
        config = build_options(
            {
                "html": {"generate_edit_links": False},
                "shell": {"program_name": "Docs", "stylesheets": ["/a.css"]},
                "pipeline": {"navigation_page_path": "/Nav", "max_include_depth": 2},
                "messages": {"html.search": "Find"},
            }
        )
        assert config.html.generate_edit_links is False
        assert config.shell.program_name == "Docs"
        assert config.shell.stylesheets == ("/a.css",)
        assert config.pipeline.navigation_page_path == "/Nav"
        assert config.pipeline.max_include_depth == 2
        assert config.messages.get_message("html.search") == "Find"

    @pytest.mark.parametrize(
        "config,match",
        [
            ({"renderer": {}}, "Unknown configuration sections"),
            ({"html": {"colour": "red"}}, "Unknown keys"),
            ({"html": []}, "must be a table"),
            ({"messages": ["a"]}, "must be a table"),
            ({"pipeline": {"max_include_depth": -1}}, "Invalid value"),
            ({"pipeline": {"startpage_path": "Index"}}, "Invalid value"),
            ({"shell": {"program_name": ""}}, "Invalid value"),
        ],
    )
    def test_invalid(self, config, match) -> None:
        """Test that bad configuration raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match=match):
            build_options(config)

    def test_original_error_is_kept(self) -> None:
        """Test that the underlying ValueError is attached."""
        with pytest.raises(ConfigurationError) as exc_info:
            build_options({"pipeline": {"event_days_before": -5}})
        assert isinstance(exc_info.value.original_error, ValueError)
