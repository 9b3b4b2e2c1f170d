"""Grammar for ``MAJOR.MINOR.PATCH`` version strings with trailing identifiers."""

import re
from typing import NamedTuple

_VERSION_RE = re.compile(r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)(?P<rest>(?:[-+.]+[A-Za-z0-9]+)*)")
_IDENTIFIER_RE = re.compile(r"([-+.]+)([A-Za-z0-9]+)")

VersionIdentifiers = list[tuple[str, str]] | None


class FullVersion(NamedTuple):
    major: int
    minor: int
    patch: int
    identifiers: VersionIdentifiers = None


def parse_full_version(text: str) -> FullVersion:
    """Parse a version such as ``1.0.0-rc.1+build.1``.

    Everything after the patch number is kept as ``(separators, identifier)``
    pairs, where separators is a run of ``-``, ``+`` and ``.`` characters:

        >>> parse_full_version("1.0.0-prerelease+meta")
        FullVersion(major=1, minor=0, patch=0, identifiers=[('-', 'prerelease'), ('+', 'meta')])

    Raises:
        ValueError: text is not a complete version string
    """
    match = _VERSION_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"Invalid version string: {text!r}")

    identifiers = _IDENTIFIER_RE.findall(match["rest"]) or None
    return FullVersion(int(match["major"]), int(match["minor"]), int(match["patch"]), identifiers)
