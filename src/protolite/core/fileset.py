from pathlib import Path

from .manifest import FilesConfig


def discover_schema_files(root: Path, files: FilesConfig) -> list[Path]:
    found: set[Path] = set()
    for pattern in files.include:
        found.update(p.resolve() for p in root.glob(pattern) if p.is_file())
    for pattern in files.exclude:
        found.difference_update(p.resolve() for p in root.glob(pattern))
    return sorted(found)


def expand_paths(paths: list[Path], files: FilesConfig) -> list[Path]:
    """Files are taken as given; directories are searched with ``files``."""
    result: set[Path] = set()
    for path in paths:
        if path.is_dir():
            result.update(discover_schema_files(path, files))
        else:
            result.add(path.resolve())
    return sorted(result)
