"""Error taxonomy for csrgen.

Every failure that aborts a run before (or while) spawning the toolkit is a
`CsrGenError`. A non-zero exit from the toolkit itself is *not* an error: it is
reported as a status by the CLI.
"""

from __future__ import annotations

from enum import Enum


class ConfigErrorKind(str, Enum):
    """Why a subject configuration could not be resolved."""

    INVALID_ARGUMENTS = "invalid_arguments"
    INVALID_FILE = "invalid_file"
    UNREADABLE_FILE = "unreadable_file"

    def label(self) -> str:
        """Human readable label for error messages."""

        return self.value.replace("_", " ")


class CsrGenError(Exception):
    """Base class for all csrgen failures."""


class ConfigurationError(CsrGenError):
    """The subject record could not be built from the given input."""

    def __init__(self, kind: ConfigErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = kind.label()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvocationError(CsrGenError):
    """The external toolkit could not be spawned."""
