"""Parsers for `pacman -Qi` output and related version strings."""

from .batch import iter_packages, parse_package, parse_packages, split_blocks
from .builder import FieldKind, PackageBuilder
from .grammar import FieldLine, LineKind, classify_line, parse_field
from .optdeps import INSTALLED_MARKER, parse_optional_dependency
from .version import FullVersion, parse_full_version

__all__ = [
    "INSTALLED_MARKER",
    "FieldKind",
    "FieldLine",
    "FullVersion",
    "LineKind",
    "PackageBuilder",
    "classify_line",
    "iter_packages",
    "parse_field",
    "parse_full_version",
    "parse_optional_dependency",
    "parse_package",
    "parse_packages",
    "split_blocks",
]
