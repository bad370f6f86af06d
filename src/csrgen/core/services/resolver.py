"""Configuration resolution.

Turns the raw CLI input into exactly one `SubjectRecord`, or fails. When a
file is given it wins over every individually supplied field.
"""

from __future__ import annotations

import logging

from csrgen.adapters.subject_file import load_subject_file
from csrgen.core.domain.models import RawSubjectInput, SubjectRecord

logger = logging.getLogger(__name__)


def resolve_subject(raw: RawSubjectInput) -> SubjectRecord:
    """Resolve the subject from `--from-file` if present, else from the flags."""

    if raw.from_file is not None:
        logger.debug("Resolving subject from file %s (flags ignored)", raw.from_file)
        return load_subject_file(raw.from_file)

    logger.debug("Resolving subject from command-line flags")
    return SubjectRecord.from_raw(raw)
