"""Exception types raised while querying and parsing package metadata."""


class PacreaderError(Exception):
    """Base class for all pacreader errors."""


class GrammarError(PacreaderError, ValueError):
    """A line could not be classified as a field line or a continuation line."""

    def __init__(self, message: str, line: str, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"{message}{location}: {line!r}")


class MissingMandatoryFieldError(PacreaderError):
    """A block ended without setting one of the mandatory fields."""

    def __init__(self, field: str, block_index: int | None = None):
        self.field = field
        self.block_index = block_index
        where = f"block {block_index}" if block_index is not None else "package block"
        super().__init__(f"Missing mandatory field '{field}' in {where}")


class BlockParseError(PacreaderError):
    """Parsing one block of a batch failed; wraps the underlying error."""

    def __init__(self, block_index: int, error: GrammarError | MissingMandatoryFieldError):
        self.block_index = block_index
        self.error = error
        super().__init__(f"Failed to parse block {block_index}: {error}")


class QueryError(PacreaderError):
    """The external package-query command could not be run or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
