"""Parser for entries of the "Optional Deps" field."""

import re

from pacreader.exceptions import GrammarError
from pacreader.models import OptionalDependency

INSTALLED_MARKER = "[installed]"

# "Optional Deps   :" or a bare indented ":" in front of the entry
_PREFIX_RE = re.compile(r"(?:Optional Deps)?[ \t]*:[ \t]*")
_MARKER_RE = re.compile(r"\s+" + re.escape(INSTALLED_MARKER) + r"$")
_ENTRY_RE = re.compile(r"(?P<name>[A-Za-z0-9.\-]+)(?:[ \t]*:(?P<description>.*))?")


def parse_optional_dependency(text: str, line_number: int | None = None) -> OptionalDependency:
    """Parse one optional dependency entry.

    Accepts ``name``, ``name: description`` and either of those followed by
    `` [installed]``. A leading ``Optional Deps :`` or ``:`` prefix, as found
    on whole lines, is skipped.

    Examples:
        >>> parse_optional_dependency("dep: dependency description [installed]")
        OptionalDependency(name='dep', description='dependency description', is_installed=True)
        >>> parse_optional_dependency("                  : dep")
        OptionalDependency(name='dep', description=None, is_installed=False)

    Raises:
        GrammarError: the entry does not start with a valid dependency name
    """
    entry = text.strip()
    if prefix := _PREFIX_RE.match(entry):
        entry = entry[prefix.end() :]

    is_installed = False
    if marker := _MARKER_RE.search(entry):
        is_installed = True
        entry = entry[: marker.start()]

    match = _ENTRY_RE.fullmatch(entry.strip())
    if match is None:
        raise GrammarError("Malformed optional dependency", text, line_number)

    description = (match["description"] or "").strip() or None
    return OptionalDependency(name=match["name"], description=description, is_installed=is_installed)
