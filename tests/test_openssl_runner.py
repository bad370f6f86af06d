from __future__ import annotations

import signal
import subprocess
from pathlib import Path

import pytest

from csrgen.adapters.openssl_runner import (
    build_openssl_command,
    describe_exit_status,
    redact_command,
    run_openssl,
)
from csrgen.core.config import AppSettings
from csrgen.core.domain.errors import InvocationError
from csrgen.core.domain.models import SubjectRecord
from csrgen.core.services.request_pipeline import generate_csr


def test_command_shape(subject_data):
    record = SubjectRecord(**subject_data)

    command = build_openssl_command(
        record, key_path=Path("acme.test.key"), csr_path=Path("acme.test.csr")
    )

    assert command == [
        "openssl",
        "req",
        "-newkey",
        "rsa:2048",
        "-nodes",
        "-keyout",
        "acme.test.key",
        "-out",
        "acme.test.csr",
        "-subj",
        "/C=US/ST=CA/L=SF/O=Acme/OU=acme.test/CN=acme.test/emailAddress=secret",
    ]


def test_redact_command_hides_subject():
    printable = redact_command(["openssl", "req", "-subj", "/CN=x/emailAddress=secret"])

    assert printable == "openssl req -subj ***"


def test_run_openssl_inherits_stdio_and_returns_code(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append((args, kwargs))
        return subprocess.CompletedProcess(args, 3)

    monkeypatch.setattr("csrgen.adapters.openssl_runner.subprocess.run", fake_run)

    assert run_openssl(["openssl", "req"]) == 3
    args, kwargs = calls[0]
    assert args == ["openssl", "req"]
    assert kwargs == {"check": False}


def test_run_openssl_spawn_failure(monkeypatch):
    def fake_run(args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", args[0])

    monkeypatch.setattr("csrgen.adapters.openssl_runner.subprocess.run", fake_run)

    with pytest.raises(InvocationError) as excinfo:
        run_openssl(["missing-openssl", "req"])

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert "missing-openssl" in str(excinfo.value)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (0, "exit status: 0"),
        (1, "exit status: 1"),
        (-signal.SIGTERM, f"signal: {int(signal.SIGTERM)} (SIGTERM)"),
    ],
)
def test_describe_exit_status(code, expected):
    assert describe_exit_status(code) == expected


def test_generate_csr_uses_settings_and_reports_status(subject_data, tmp_path: Path):
    record = SubjectRecord(**subject_data)
    settings = AppSettings(openssl_binary="/opt/ssl/bin/openssl", output_dir=tmp_path)
    seen = []

    def runner(command):
        seen.append(list(command))
        return 0

    outcome = generate_csr(record, settings, runner=runner)

    assert seen[0][0] == "/opt/ssl/bin/openssl"
    assert seen[0][6] == str(tmp_path / "acme.test.key")
    assert seen[0][8] == str(tmp_path / "acme.test.csr")
    assert outcome.key_path == tmp_path / "acme.test.key"
    assert outcome.csr_path == tmp_path / "acme.test.csr"
    assert outcome.subject == record.to_distinguished_name()
    assert outcome.succeeded


def test_generate_csr_does_not_raise_on_tool_failure(subject_data):
    record = SubjectRecord(**subject_data)

    outcome = generate_csr(record, AppSettings(), runner=lambda command: 1)

    assert outcome.returncode == 1
    assert not outcome.succeeded
