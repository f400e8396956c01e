"""Current git commit hash, resolved once per process.

The hash is baked into the generated ``BuildProfile`` object. Any failure
(git not installed, not a repository, non-zero exit) yields
:data:`UNKNOWN_HASH` instead of failing the build.
"""

from __future__ import annotations

import functools
import logging
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

UNKNOWN_HASH = "N/A"
"""Value returned when the commit hash cannot be determined."""

_GIT_TIMEOUT_SECONDS = 10


@functools.lru_cache(maxsize=None)
def _rev_parse_head(cwd: str) -> str:
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=_GIT_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git rev-parse failed in %s: %s", cwd, exc)
        return UNKNOWN_HASH

    if result.returncode != 0:
        logger.debug("git rev-parse exited with %d in %s", result.returncode, cwd)
        return UNKNOWN_HASH

    lines = result.stdout.strip().splitlines()
    return lines[0].strip() if lines else UNKNOWN_HASH


def git_commit_hash(cwd: Optional[Path] = None) -> str:
    """Return ``git rev-parse HEAD`` for *cwd*, or ``"N/A"`` on any failure.

    Results are cached per resolved directory for the lifetime of the
    process; call :func:`clear_cache` to force a new lookup.
    """
    directory = Path(cwd) if cwd is not None else Path.cwd()
    return _rev_parse_head(str(directory.resolve()))


def clear_cache() -> None:
    """Forget cached hashes (used by tests)."""
    _rev_parse_head.cache_clear()
