"""Assemble parsed field lines into a PackageRecord."""

import logging
from enum import StrEnum
from typing import Any

from pacreader.exceptions import GrammarError, MissingMandatoryFieldError
from pacreader.models import OptionalDependency, PackageRecord
from pacreader.parser.grammar import parse_field
from pacreader.parser.optdeps import parse_optional_dependency

logger = logging.getLogger(__name__)

NONE_VALUE = "None"


class FieldKind(StrEnum):
    """Field labels printed by `pacman -Qi`."""

    NAME = "Name"
    VERSION = "Version"
    DESCRIPTION = "Description"
    ARCHITECTURE = "Architecture"
    URL = "URL"
    LICENSES = "Licenses"
    GROUPS = "Groups"
    PROVIDES = "Provides"
    DEPENDS_ON = "Depends On"
    OPTIONAL_DEPS = "Optional Deps"
    REQUIRED_BY = "Required By"
    OPTIONAL_FOR = "Optional For"
    CONFLICTS_WITH = "Conflicts With"
    REPLACES = "Replaces"
    INSTALLED_SIZE = "Installed Size"
    PACKAGER = "Packager"
    BUILD_DATE = "Build Date"
    INSTALL_DATE = "Install Date"
    INSTALL_REASON = "Install Reason"
    INSTALL_SCRIPT = "Install Script"
    VALIDATED_BY = "Validated By"

    @classmethod
    def lookup(cls, label: str) -> "FieldKind | None":
        """Return the kind for a field label, or None if pacman's label is not one we know."""
        try:
            return cls(label)
        except ValueError:
            return None


# fmt: off
MANDATORY_FIELDS: dict[FieldKind, str] = {
    FieldKind.NAME: "name",
    FieldKind.VERSION: "version",
    FieldKind.DESCRIPTION: "description",
    FieldKind.ARCHITECTURE: "architecture",
    FieldKind.INSTALLED_SIZE: "installed_size",
    FieldKind.PACKAGER: "packager",
    FieldKind.BUILD_DATE: "build_date",
    FieldKind.INSTALL_DATE: "install_date",
    FieldKind.INSTALL_REASON: "install_reason",
    FieldKind.INSTALL_SCRIPT: "install_script",
}

OPTIONAL_FIELDS: dict[FieldKind, str] = {
    FieldKind.URL: "url",
    FieldKind.GROUPS: "groups",
    FieldKind.PROVIDES: "provides",
    FieldKind.DEPENDS_ON: "depends_on",
    FieldKind.REQUIRED_BY: "required_by",
    FieldKind.OPTIONAL_FOR: "optional_for",
    FieldKind.CONFLICTS_WITH: "conflicts_with",
    FieldKind.REPLACES: "replaces",
    FieldKind.VALIDATED_BY: "validated_by",
}
# fmt: on

# mandatory fields that identify the package and may not be present-but-empty
NON_BLANK_FIELDS = (FieldKind.NAME, FieldKind.VERSION)


class PackageBuilder:
    """Accumulates the fields of one package block and builds the record.

    The only state carried between lines is ``currently_building``: the kind of
    the last real field line seen. It is consulted when a continuation line
    arrives, which is only valid while "Optional Deps" is open.
    """

    def __init__(self, block_index: int | None = None):
        self.block_index = block_index
        self.currently_building: FieldKind | None = None
        self.optional_dependencies: list[OptionalDependency] | None = None
        self.unknown_fields: list[tuple[str, str | None]] = []
        self._values: dict[str, Any] = {}
        self._line_number = 0

    def feed(self, line: str) -> None:
        """Classify one line of the block and apply it."""
        self._line_number += 1
        field = parse_field(line, self._line_number)
        if field.name:
            self.add_field(field.name, field.value)
        else:
            self.add_continuation(field.value or "")

    def add_field(self, label: str, value: str | None) -> None:
        """Apply one ``label : value`` field with the coercion its kind calls for."""
        kind = FieldKind.lookup(label)
        self.currently_building = kind

        if kind is None:
            logger.warning(f"Ignoring unknown field '{label}' in {self._where()}")
            self.unknown_fields.append((label, value))
            return

        value = value if value is not None else ""
        match kind:
            case FieldKind.LICENSES:
                self._values["licenses"] = [] if value == NONE_VALUE else value.split()
            case FieldKind.OPTIONAL_DEPS:
                if value != NONE_VALUE:
                    self._append_dependency(value)
            case _ if kind in MANDATORY_FIELDS:
                self._values[MANDATORY_FIELDS[kind]] = value
            case _:
                self._values[OPTIONAL_FIELDS[kind]] = None if value == NONE_VALUE else value

    def add_continuation(self, text: str) -> None:
        """Append a wrapped "Optional Deps" entry.

        Raises:
            GrammarError: no "Optional Deps" field is open
        """
        if self.currently_building is not FieldKind.OPTIONAL_DEPS:
            raise GrammarError(
                f"Continuation line outside of '{FieldKind.OPTIONAL_DEPS}'", text, self._line_number or None
            )
        self._append_dependency(text)

    def build(self) -> PackageRecord:
        """Create the record.

        Raises:
            MissingMandatoryFieldError: a mandatory field never appeared in the block,
                or an identifying field (Name, Version) is blank
        """
        for kind, attr in MANDATORY_FIELDS.items():
            if attr not in self._values:
                raise MissingMandatoryFieldError(kind.value, self.block_index)

        for kind in NON_BLANK_FIELDS:
            if not self._values[MANDATORY_FIELDS[kind]].strip():
                raise MissingMandatoryFieldError(kind.value, self.block_index)

        optional_dependencies = list(self.optional_dependencies) if self.optional_dependencies else None
        return PackageRecord(**self._values, optional_dependencies=optional_dependencies)

    def _append_dependency(self, text: str) -> None:
        dependency = parse_optional_dependency(text, self._line_number or None)
        if self.optional_dependencies is None:
            self.optional_dependencies = []
        self.optional_dependencies.append(dependency)

    def _where(self) -> str:
        if self.block_index is None:
            return f"line {self._line_number}"
        return f"block {self.block_index}, line {self._line_number}"
