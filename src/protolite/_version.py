"""Version lookup for protolite."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

# Only present in a source checkout
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Version declared by the source checkout, else by the installed distribution."""
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "protolite" and "version" in project:
            return project["version"]
    try:
        return version("protolite")
    except PackageNotFoundError:
        return "0.0.0"
