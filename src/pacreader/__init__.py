"""pacreader: structured parser for pacman's installed-package metadata."""

from .exceptions import (
    BlockParseError,
    GrammarError,
    MissingMandatoryFieldError,
    PacreaderError,
    QueryError,
)
from .models import OptionalDependency, PackageRecord
from .parser import FullVersion, iter_packages, parse_full_version, parse_package, parse_packages
from .utils import is_url_friendly

__version__ = "0.1.0"

__all__ = [
    "BlockParseError",
    "FullVersion",
    "GrammarError",
    "MissingMandatoryFieldError",
    "OptionalDependency",
    "PackageRecord",
    "PacreaderError",
    "QueryError",
    "is_url_friendly",
    "iter_packages",
    "parse_package",
    "parse_full_version",
    "parse_packages",
]
