"""Split `pacman -Qi` output into package blocks and parse each one."""

import logging
import re
from collections.abc import Iterator

from pacreader.exceptions import BlockParseError, GrammarError, MissingMandatoryFieldError
from pacreader.models import PackageRecord
from pacreader.parser.builder import PackageBuilder

logger = logging.getLogger(__name__)

_BLOCK_SEPARATOR_RE = re.compile(r"\n(?:[ \t]*\n)+")


def split_blocks(text: str) -> list[str]:
    """Split tool output into per-package blocks on blank lines.

    A run of several blank lines counts as one separator. Empty or
    whitespace-only input yields no blocks.
    """
    text = text.replace("\r\n", "\n").strip()
    if not text:
        return []
    return _BLOCK_SEPARATOR_RE.split(text)


def parse_package(block: str, *, block_index: int | None = None) -> PackageRecord:
    """Parse the text of a single package block.

    Args:
        block: The block text, one field or continuation line per physical line
        block_index: Position of the block in its batch, reported in errors

    Returns:
        The parsed PackageRecord

    Raises:
        GrammarError: a line of the block is malformed
        MissingMandatoryFieldError: the block lacks a mandatory field
    """
    builder = PackageBuilder(block_index=block_index)
    for line in block.strip("\n").split("\n"):
        builder.feed(line)
    return builder.build()


def iter_packages(text: str, *, skip_invalid: bool = False) -> Iterator[PackageRecord]:
    """Lazily parse every block of the tool output, in input order.

    Args:
        text: Captured stdout of `pacman -Qi`
        skip_invalid: Log and skip blocks that fail to parse instead of raising

    Raises:
        BlockParseError: a block failed to parse and skip_invalid is False
    """
    for index, block in enumerate(split_blocks(text)):
        try:
            record = parse_package(block, block_index=index)
        except (GrammarError, MissingMandatoryFieldError) as e:
            if not skip_invalid:
                raise BlockParseError(index, e) from e
            logger.error(f"Skipping block {index}: {e}")
            continue
        yield record


def parse_packages(text: str, *, skip_invalid: bool = False) -> list[PackageRecord]:
    """Parse the full tool output into a list of records, one per block."""
    packages = list(iter_packages(text, skip_invalid=skip_invalid))
    logger.debug(f"Parsed {len(packages)} package records")
    return packages
