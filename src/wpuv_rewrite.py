"""wp-update-version: rewrite version strings in header blocks and PHP constants."""

from __future__ import annotations

import re

# Deliberately loose: any run of non-whitespace is accepted as a version.
VERSION_RE = r"[.\S]+"

PHP_HEADER_RE = re.compile(rf"\s*\*\s*(Version):\s*(?P<version>{VERSION_RE})\r?\n")
CSS_HEADER_RE = re.compile(rf"\s*\**\s*(Version):\s*(?P<version>{VERSION_RE})\r?\n")

HEADER_PATTERNS = {"php": PHP_HEADER_RE, "css": CSS_HEADER_RE}


def _replace_group(match: re.Match, group: str, value: str) -> str:
    """Return the matched text with only ``group`` swapped for ``value``."""
    offset = match.start()
    start, end = match.span(group)
    text = match.group(0)
    return text[: start - offset] + value + text[end - offset :]


def constant_pattern(constant_name: str) -> re.Pattern:
    """Build the pattern matching ``define()`` and ``const`` declarations of a constant.

    Quotes must agree within one declaration, so ``define("X", 'V')`` is not matched.
    """
    name = re.escape(constant_name)
    define = rf"\bdefine\(\s*(?P<q1>['\"]){name}(?P=q1)\s*,\s*(?P=q1)(?P<v1>{VERSION_RE}?)(?P=q1)\s*\)"
    const = rf"\bconst\s*{name}\s*=\s*(?P<q2>['\"])(?P<v2>{VERSION_RE}?)(?P=q2)"
    return re.compile(f"{define}|{const}")


def rewrite_header(content: str, new_version: str, file_type: str = "php") -> str:
    """Replace the version of the first ``Version:`` line in a comment block.

    Content without such a line is returned unchanged.
    """
    pattern = HEADER_PATTERNS[file_type]
    return pattern.sub(lambda m: _replace_group(m, "version", new_version), content, count=1)


def rewrite_constant(content: str, new_version: str, constant_name: str) -> str:
    """Replace the value of every ``define()``/``const`` declaration of ``constant_name``."""

    def replacer(match: re.Match) -> str:
        group = "v1" if match.group("v1") is not None else "v2"
        return _replace_group(match, group, new_version)

    return constant_pattern(constant_name).sub(replacer, content)

