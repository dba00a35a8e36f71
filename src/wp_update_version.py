"""wp-update-version: update the version of a WordPress theme or plugin."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from wpuv_files import (
    DEFAULT_PACKAGE_JSON,
    default_files,
    get_file_absolute_path,
    get_file_content,
    get_version,
    validate_file_type,
    write_file_content,
)
from wpuv_rewrite import rewrite_constant, rewrite_header

PROG = "wp-update-version"


def _get_tool_version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "unknown"


def update_file(path: Path, new_version: str, constant_name: str | None = None) -> bool | None:
    """Rewrite header and constant versions in one file.

    Returns True if the file was written, False if nothing changed,
    None if the file is empty and was skipped.
    """
    file_type = validate_file_type(path)
    content = get_file_content(path)
    if content is None:
        return None

    updated = rewrite_header(content, new_version, file_type)
    if file_type == "php" and constant_name:
        updated = rewrite_constant(updated, new_version, constant_name)

    if updated == content:
        return False
    write_file_content(path, updated)
    return True


def handle_file(filename: str, new_version: str, constant_name: str | None = None) -> bool:
    """Process one file, reporting the outcome. Returns False on failure."""
    try:
        path = get_file_absolute_path(filename)
        result = update_file(path, new_version, constant_name)
    except (OSError, ValueError) as exc:
        print(f"{PROG}: could not update {filename} ({exc})", file=sys.stderr)
        return False

    if result is None:
        print(f"{PROG}: WARNING — {filename} is empty, skipping.", file=sys.stderr)
    elif result:
        print(f"{PROG}: updated {filename}")
    else:
        print(f"{PROG}: unchanged {filename}")
    return True


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=PROG, description="Update the version of a WordPress theme or plugin.")
    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        default=None,
        help=(
            "File to update. Can be repeated to update multiple files. "
            "Defaults to style.css and <directory-name>.php in the current directory."
        ),
    )
    parser.add_argument(
        "--package-json",
        "--package-file",
        dest="package_json",
        default=DEFAULT_PACKAGE_JSON,
        help=f"JSON manifest to read the version from (default: '{DEFAULT_PACKAGE_JSON}').",
    )
    parser.add_argument(
        "--project-version",
        default=None,
        help="Version to write. Overrides the manifest version.",
    )
    parser.add_argument(
        "--constant",
        default=None,
        help="PHP constant to update alongside the header (ignored if empty).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_tool_version()}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    files = args.files or default_files(Path.cwd())

    try:
        new_version = get_version(args.package_json, args.project_version)
    except ValueError as exc:
        print(f"{PROG}: ERROR — {exc}", file=sys.stderr)
        return 1

    failed = [f for f in files if not handle_file(f, new_version, args.constant)]

    if failed:
        print(
            f"{PROG}: version {new_version} applied, {len(failed)} of {len(files)} file(s) could not be updated.",
            file=sys.stderr,
        )
    else:
        print(f"{PROG}: version {new_version} applied to {len(files)} file(s).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
