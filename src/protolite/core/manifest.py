import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .formatter import FormatOptions

CONFIG_FILENAME = "protolite.toml"
PYPROJECT_FILENAME = "pyproject.toml"


@dataclass
class FilesConfig:
    """Schema file discovery."""

    include: list[str] = field(default_factory=lambda: ["**/*.proto"])
    exclude: list[str] = field(default_factory=list)


@dataclass
class ProtoliteConfig:
    """
    Project configuration loaded from protolite.toml.

    Examples in protolite.toml:

        [format]
        indent_width = 2
        option_spacing = true

        [files]
        include = ["schemas/**/*.proto"]

    The same tables may live under [tool.protolite] in pyproject.toml.
    """

    format: FormatOptions = field(default_factory=FormatOptions)
    files: FilesConfig = field(default_factory=FilesConfig)
    path: Path | None = None  # file the config was read from


def find_config(start: Path) -> Path | None:
    """
    Look for configuration from ``start`` upwards.

    A protolite.toml wins over a pyproject.toml in the same directory; a
    pyproject.toml only counts if it has a [tool.protolite] table.
    """
    start = start.resolve()
    if start.is_file():
        start = start.parent
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and "protolite" in _read_toml(pyproject).get("tool", {}):
            return pyproject
    return None


def load_config(path: Path | None) -> ProtoliteConfig:
    """
    Load configuration from ``path``; None yields the defaults.

    Raises:
        ConfigError: If the file is not valid TOML or a value has the wrong type
    """
    if path is None:
        return ProtoliteConfig()

    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        data = data.get("tool", {}).get("protolite", {})

    format_data = _table(data, "format", path)
    files_data = _table(data, "files", path)

    format_options = FormatOptions(
        indent_width=_typed(format_data, "indent_width", int, 4, path),
        use_tabs=_typed(format_data, "use_tabs", bool, False, path),
        option_spacing=_typed(format_data, "option_spacing", bool, False, path),
    )
    if format_options.indent_width < 0:
        raise ConfigError(f"{path}: format.indent_width must not be negative")
    _reject_unknown(format_data, {f.name for f in fields(FormatOptions)}, "format", path)

    files_config = FilesConfig(
        include=_string_list(files_data, "include", ["**/*.proto"], path),
        exclude=_string_list(files_data, "exclude", [], path),
    )
    _reject_unknown(files_data, {"include", "exclude"}, "files", path)

    return ProtoliteConfig(format=format_options, files=files_config, path=path)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: invalid TOML: {e}") from e


def _table(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{path}: [{key}] must be a table")
    return value


def _typed(data: dict[str, Any], key: str, kind: type, default: Any, path: Path) -> Any:
    value = data.get(key, default)
    # bool is a subclass of int
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{path}: {key} must be of type {kind.__name__}, got {value!r}")
    return value


def _string_list(data: dict[str, Any], key: str, default: list[str], path: Path) -> list[str]:
    value = data.get(key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{path}: files.{key} must be a list of strings")
    return list(value)


def _reject_unknown(data: dict[str, Any], known: set[str], table: str, path: Path) -> None:
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown key(s) in [{table}]: {', '.join(unknown)}")
