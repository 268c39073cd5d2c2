"""Tests for protolite configuration loading."""

from pathlib import Path

import pytest

from protolite.core.errors import ConfigError
from protolite.core.formatter import FormatOptions
from protolite.core.manifest import find_config, load_config


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config(None)
        assert config.format == FormatOptions()
        assert config.files.include == ["**/*.proto"]
        assert config.files.exclude == []
        assert config.path is None

    def test_protolite_toml(self, tmp_path: Path) -> None:
        path = write(
            tmp_path / "protolite.toml",
            """
[format]
indent_width = 2
option_spacing = true

[files]
include = ["schemas/**/*.proto"]
exclude = ["schemas/vendor/**"]
""",
        )
        config = load_config(path)
        assert config.format == FormatOptions(indent_width=2, option_spacing=True)
        assert config.files.include == ["schemas/**/*.proto"]
        assert config.files.exclude == ["schemas/vendor/**"]
        assert config.path == path

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        path = write(
            tmp_path / "pyproject.toml",
            """
[project]
name = "demo"

[tool.protolite.format]
use_tabs = true
""",
        )
        config = load_config(path)
        assert config.format.use_tabs
        assert config.format.indent_width == 4

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(write(tmp_path / "protolite.toml", ""))
        assert config.format == FormatOptions()


class TestInvalidConfig:
    @pytest.mark.parametrize(
        "text",
        [
            '[format]\nindent_width = "four"\n',
            "[format]\nindent_width = true\n",
            "[format]\nindent_width = -1\n",
            '[format]\nuse_tabs = "yes"\n',
            "[format]\nwrap = 80\n",
            '[files]\ninclude = "*.proto"\n',
            "[files]\ninclude = [1]\n",
            '[files]\nsources = ["a"]\n',
            'format = "compact"\n',
        ],
    )
    def test_rejected(self, tmp_path: Path, text: str) -> None:
        with pytest.raises(ConfigError):
            load_config(write(tmp_path / "protolite.toml", text))

    def test_malformed_toml(self, tmp_path: Path) -> None:
        path = write(tmp_path / "protolite.toml", "[format\n")
        with pytest.raises(ConfigError, match="invalid TOML"):
            load_config(path)

    def test_error_names_the_file(self, tmp_path: Path) -> None:
        path = write(tmp_path / "protolite.toml", "[format]\nwrap = 80\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert str(path) in str(exc_info.value)
        assert "wrap" in str(exc_info.value)


class TestFindConfig:
    def test_walks_up_from_subdirectory(self, tmp_path: Path) -> None:
        path = write(tmp_path / "protolite.toml", "")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == path.resolve()

    def test_starts_from_file_parent(self, tmp_path: Path) -> None:
        path = write(tmp_path / "protolite.toml", "")
        schema = write(tmp_path / "x.proto", "a;")
        assert find_config(schema) == path.resolve()

    def test_protolite_toml_wins(self, tmp_path: Path) -> None:
        write(tmp_path / "pyproject.toml", "[tool.protolite]\n")
        path = write(tmp_path / "protolite.toml", "")
        assert find_config(tmp_path) == path.resolve()

    def test_pyproject_needs_tool_table(self, tmp_path: Path) -> None:
        path = write(tmp_path / "protolite.toml", "")
        nested = tmp_path / "inner"
        nested.mkdir()
        write(nested / "pyproject.toml", '[project]\nname = "demo"\n')
        assert find_config(nested) == path.resolve()

    def test_pyproject_with_tool_table(self, tmp_path: Path) -> None:
        path = write(tmp_path / "pyproject.toml", "[tool.protolite.format]\nuse_tabs = true\n")
        assert find_config(tmp_path) == path.resolve()
