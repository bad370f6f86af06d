from __future__ import annotations

import subprocess

from typer.testing import CliRunner

from csrgen.cli import doctor

runner = CliRunner()


def test_doctor_reports_missing_binary(monkeypatch):
    monkeypatch.setenv("CSRGEN_OPENSSL_BINARY", "definitely-not-openssl-xyz")
    monkeypatch.setattr(doctor.shutil, "which", lambda name: None)

    result = runner.invoke(doctor.app, [])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_doctor_ok(monkeypatch):
    monkeypatch.setattr(doctor.shutil, "which", lambda name: "/usr/bin/openssl")
    monkeypatch.setattr(
        doctor.subprocess,
        "run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 0, stdout="OpenSSL 3.0.13\n", stderr=""),
    )

    result = runner.invoke(doctor.app, [])

    assert result.exit_code == 0, result.output
    assert "OpenSSL 3.0.13" in result.output
