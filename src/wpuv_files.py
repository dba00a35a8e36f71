"""wp-update-version: file helpers (paths, content, file types, manifest version)."""

from __future__ import annotations

import json
from pathlib import Path

DEFAULT_PACKAGE_JSON = "package.json"
DEFAULT_STYLESHEET = "style.css"

FILE_TYPES = {
    ".css": "css",
    ".scss": "css",
    ".sass": "css",
    ".php": "php",
}


def get_file_absolute_path(file: str | Path) -> Path:
    return (Path.cwd() / file).resolve()


def default_files(project_dir: Path) -> list[str]:
    """Theme stylesheet plus the main plugin file named after the project directory."""
    return [DEFAULT_STYLESHEET, f"{project_dir.name}.php"]


def get_file_content(path: Path) -> str | None:
    """Read a file verbatim. Returns None for an empty file.

    Raises FileNotFoundError if the file does not exist and
    IsADirectoryError if the path is a directory.
    """
    if path.is_dir():
        raise IsADirectoryError(f"{path} is a directory, not a file")
    if not path.is_file():
        raise FileNotFoundError(f"File {path} does not exist")
    # newline="" keeps CRLF line endings intact
    with open(path, encoding="utf-8", newline="") as f:
        content = f.read()
    return content or None


def write_file_content(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def validate_file_type(path: Path) -> str:
    file_type = FILE_TYPES.get(path.suffix.lower())
    if file_type is None:
        raise ValueError(f"File {path.name} has an unsupported type")
    return file_type


def get_package_version(package_file: Path | None = None) -> str | None:
    """Return the top-level ``version`` of a JSON manifest, or None if unavailable."""
    path = package_file if package_file is not None else get_file_absolute_path(DEFAULT_PACKAGE_JSON)
    try:
        content = get_file_content(path)
        data = json.loads(content) if content else None
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    version = data.get("version")
    if not isinstance(version, str) or not version:
        return None
    return version


def get_version(package_json: str | Path, project_version: str | None = None) -> str:
    """Resolve the version to write: explicit value first, then the manifest.

    Raises ValueError when neither yields a usable version.
    """
    version = project_version or get_package_version(get_file_absolute_path(package_json))
    if not version:
        raise ValueError("No version number or valid package.json file was provided")
    if any(ch.isspace() for ch in version):
        raise ValueError(f"Invalid version {version!r}: versions cannot contain whitespace")
    return version
