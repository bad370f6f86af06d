"""Domain models and errors.

Why:
- Pure, strict data structures (Pydantic v2) for the certificate subject.
- The domain does not know about subprocesses, files or the CLI.
"""

from csrgen.core.domain.errors import (
    ConfigErrorKind,
    ConfigurationError,
    CsrGenError,
    InvocationError,
)
from csrgen.core.domain.models import RawSubjectInput, SubjectRecord

__all__ = [
    "ConfigErrorKind",
    "ConfigurationError",
    "CsrGenError",
    "InvocationError",
    "RawSubjectInput",
    "SubjectRecord",
]
