"""Numeric process exit codes returned by the ``querent`` CLI.

Each constant maps to an error category and is referenced by the
corresponding :class:`~querent.exceptions.QuerentError` subclass. Build
scripts wrapping ``querent generate`` can branch on the exit code without
parsing stderr.
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_CONFIG_ERROR = 3
"""The configuration file is missing, malformed, or failed validation."""

EXIT_HOST_ERROR = 4
"""The host project model was driven incorrectly (unknown variant, re-evaluation)."""

EXIT_IO_ERROR = 5
"""Writing generated files failed (unwritable output directory, disk full)."""

EXIT_BLUEPRINT_ERROR = 10
"""A blueprint failed to load or was used outside its lifecycle."""
