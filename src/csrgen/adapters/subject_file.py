"""Loading of JSON subject files.

Expected shape:
    {"country": "US", "state_or_province": "CA", "locality": "SF",
     "org_name": "Acme", "common_name": "acme.test",
     "email": "a@b.com", "password": "secret"}

`email` and `password` are optional; unknown keys are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from csrgen.core.domain.errors import ConfigErrorKind, ConfigurationError
from csrgen.core.domain.models import SubjectRecord

logger = logging.getLogger(__name__)


def load_subject_file(path: Path) -> SubjectRecord:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(ConfigErrorKind.UNREADABLE_FILE, f"{path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(ConfigErrorKind.INVALID_FILE, f"{path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            ConfigErrorKind.INVALID_FILE,
            f"{path}: expected a JSON object, got {type(data).__name__}",
        )

    try:
        record = SubjectRecord.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
        raise ConfigurationError(ConfigErrorKind.INVALID_FILE, f"{path}: invalid {fields}") from exc

    logger.debug("Loaded subject for %s from %s", record.common_name, path)
    return record
