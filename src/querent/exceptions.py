"""Exception hierarchy for querent.

All exceptions inherit from :class:`QuerentError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`querent.exit_codes`.
The top-level handler in :func:`querent.app.main` catches ``QuerentError``
and exits with the appropriate code.

Filesystem errors raised while emitting files are deliberately *not*
wrapped: they propagate as plain :class:`OSError` and are reported by the
entry point with :data:`~querent.exit_codes.EXIT_IO_ERROR`.

Subclass hierarchy::

    QuerentError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- ConfigError         (exit 3)
    +-- HostError           (exit 4)
    +-- BlueprintError      (exit 10)
"""

from querent.exit_codes import (
    EXIT_BLUEPRINT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_HOST_ERROR,
    EXIT_INVALID_USAGE,
)


class QuerentError(Exception):
    """Base exception for all querent errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(QuerentError):
    """Raised for invalid CLI arguments."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(QuerentError):
    """Raised for configuration problems (missing file, invalid YAML/JSON, bad values)."""

    exit_code = EXIT_CONFIG_ERROR


class HostError(QuerentError):
    """Raised when the host project is evaluated twice or asked for an unknown variant."""

    exit_code = EXIT_HOST_ERROR


class BlueprintError(QuerentError):
    """Raised when a blueprint fails to load or is driven outside its lifecycle."""

    exit_code = EXIT_BLUEPRINT_ERROR
