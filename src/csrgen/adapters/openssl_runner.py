"""Subprocess wrapper around `openssl req`.

Why an adapter:
- Keeps argument construction testable without spawning anything.
- The only place in the project that touches `subprocess`.
"""

from __future__ import annotations

import logging
import signal
import subprocess
from pathlib import Path
from typing import Sequence

from csrgen.core.domain.errors import InvocationError
from csrgen.core.domain.models import SubjectRecord

logger = logging.getLogger(__name__)

KEY_SPEC = "rsa:2048"


def build_openssl_command(
    record: SubjectRecord,
    *,
    key_path: Path,
    csr_path: Path,
    binary: str = "openssl",
) -> list[str]:
    """New RSA 2048 key pair, unencrypted key (`-nodes`), explicit subject."""

    return [
        binary,
        "req",
        "-newkey",
        KEY_SPEC,
        "-nodes",
        "-keyout",
        str(key_path),
        "-out",
        str(csr_path),
        "-subj",
        record.to_distinguished_name(),
    ]


def redact_command(command: Sequence[str]) -> str:
    """Printable command line with the `-subj` value masked (it carries the password)."""

    parts = list(command)
    for i, part in enumerate(parts[:-1]):
        if part == "-subj":
            parts[i + 1] = "***"
    return " ".join(parts)


def run_openssl(command: Sequence[str]) -> int:
    """Run the toolkit with inherited stdio and return its exit code.

    A non-zero (or negative, i.e. signaled) code is returned, not raised.
    """

    logger.debug("Executing: %s", redact_command(command))
    try:
        completed = subprocess.run(list(command), check=False)
    except OSError as exc:
        raise InvocationError(f"failed to spawn {command[0]!r}: {exc}") from exc

    logger.info("%s exited with code %s", command[0], completed.returncode)
    return completed.returncode


def describe_exit_status(returncode: int) -> str:
    if returncode >= 0:
        return f"exit status: {returncode}"

    signum = -returncode
    try:
        name = signal.Signals(signum).name
    except ValueError:
        return f"signal: {signum}"
    return f"signal: {signum} ({name})"
