from __future__ import annotations

import json
from pathlib import Path

import pytest

from csrgen.core.domain.models import RawSubjectInput

SUBJECT = {
    "country": "US",
    "state_or_province": "CA",
    "locality": "SF",
    "org_name": "Acme",
    "common_name": "acme.test",
    "email": "a@b.com",
    "password": "secret",
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run every test in an empty directory with no CSRGEN_* overrides."""

    for var in ("CSRGEN_OPENSSL_BINARY", "CSRGEN_OUTPUT_DIR", "CSRGEN_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def subject_data() -> dict[str, str]:
    return dict(SUBJECT)


@pytest.fixture
def raw_flags(subject_data: dict[str, str]) -> RawSubjectInput:
    return RawSubjectInput(**subject_data)


@pytest.fixture
def subject_file(tmp_path: Path, subject_data: dict[str, str]) -> Path:
    path = tmp_path / "subject.json"
    path.write_text(json.dumps(subject_data), encoding="utf-8")
    return path
