"""Line classification and field grammar for `pacman -Qi` output.

Every physical line of a package block is one of:

* a field line, ``Install Script  : No``: a one or two word name, optional
  spaces, ``:`` and the value;
* a continuation line, which extends the "Optional Deps" list. pacman prints
  these indented (``                  dep2: description``); the colon-prefixed
  layout (``                : dep2: description``) and unindented lines whose
  "field name" starts lowercase (``dep2: description``) are accepted as well;
* a blank line, which separates package blocks and is never part of one.
"""

import re
from enum import StrEnum
from typing import NamedTuple

from pacreader.exceptions import GrammarError

# one or two alphabetic words separated by a single space, then the colon
_FIELD_RE = re.compile(r"(?P<name>[A-Za-z]+(?: [A-Za-z]+)?)[ \t]*:[ \t]*(?P<value>.*)")
# empty field name: indentation, optional colon, then the continued value
_CONTINUATION_RE = re.compile(r"[ \t]+(?::[ \t]*)?(?P<value>[^\s:].*)")


class LineKind(StrEnum):
    """What a single line of a package block does."""

    FIELD = "field"
    CONTINUATION = "continuation"
    BLANK = "blank"


class FieldLine(NamedTuple):
    """One parsed line: field name (empty for continuations), raw value and installed flag."""

    name: str
    value: str | None
    is_installed: bool = False


def _match(line: str, line_number: int | None = None) -> tuple[LineKind, FieldLine | None]:
    line = line.rstrip("\r\n")
    if not line.strip():
        return LineKind.BLANK, None

    if match := _FIELD_RE.fullmatch(line):
        name = match["name"]
        value = match["value"].strip()
        if name[0].isupper():
            return LineKind.FIELD, FieldLine(name, value)
        # lowercase "field name" is the first word of a wrapped dependency entry
        return LineKind.CONTINUATION, FieldLine("", f"{name}: {value}" if value else name)

    if match := _CONTINUATION_RE.fullmatch(line):
        return LineKind.CONTINUATION, FieldLine("", match["value"].strip())

    if line[0].islower() and ":" in line:
        return LineKind.CONTINUATION, FieldLine("", line.strip())

    raise GrammarError("Line is neither a field line nor a continuation line", line, line_number)


def classify_line(line: str) -> LineKind:
    """Classify a raw line as a field line, a continuation line or a blank separator.

    Raises:
        GrammarError: the line fits none of the three shapes
    """
    kind, _ = _match(line)
    return kind


def parse_field(line: str, line_number: int | None = None) -> FieldLine:
    """Parse one field or continuation line.

    Field lines yield ``(name, value, False)`` with the value stripped of the
    spaces around it but otherwise untouched (``"None"`` stays ``"None"``).
    Continuation lines yield ``("", text, False)`` where ``text`` is the
    dependency entry to hand to the optional-dependency parser.

    Args:
        line: A single line without its line break
        line_number: Position of the line in its block, used in error messages

    Returns:
        The parsed FieldLine

    Raises:
        GrammarError: the line is blank or malformed
    """
    kind, field = _match(line, line_number)
    if field is None:
        raise GrammarError(f"Expected a field line, got a {kind.value} line", line, line_number)
    return field
