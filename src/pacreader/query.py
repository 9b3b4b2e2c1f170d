"""Run the system package-query command and capture its output."""

import logging
import subprocess
from collections.abc import Sequence

from pacreader import constants
from pacreader.exceptions import QueryError

logger = logging.getLogger(__name__)


def build_query_command(names: Sequence[str] = (), pacman: str | None = None) -> list[str]:
    """Construct the `pacman -Q -i` command line for the given package names."""
    return [pacman or constants.PACMAN_BIN, "-Q", "-i", *names]


def query_installed(names: Sequence[str] = (), *, pacman: str | None = None) -> str:
    """Query pacman for installed package metadata.

    Args:
        names: Packages to query. All installed packages when empty.
        pacman: pacman binary to run. Defaults to PACREADER_PACMAN or "pacman".

    Returns:
        pacman's stdout, stripped of leading and trailing whitespace

    Raises:
        QueryError: the binary could not be started or exited with a non-zero status
    """
    cmd = build_query_command(names, pacman)
    logger.debug(f"Running {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise QueryError(f"Package query command not found: {cmd[0]}") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise QueryError(
            f"'{' '.join(cmd)}' exited with status {e.returncode}: {stderr}",
            returncode=e.returncode,
            stderr=stderr,
        ) from e

    return result.stdout.strip()
