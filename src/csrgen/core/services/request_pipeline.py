"""CSR request orchestration.

Keeps the CLI free of path/command assembly so the flow can be exercised in
tests with a stub runner instead of a real openssl process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from csrgen.adapters.openssl_runner import build_openssl_command, run_openssl
from csrgen.core.config import AppSettings
from csrgen.core.domain.models import SubjectRecord

logger = logging.getLogger(__name__)

Runner = Callable[[Sequence[str]], int]


@dataclass(frozen=True)
class RequestOutcome:
    """Result of one toolkit invocation."""

    key_path: Path
    csr_path: Path
    subject: str
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def generate_csr(
    record: SubjectRecord,
    settings: AppSettings | None = None,
    *,
    runner: Runner = run_openssl,
) -> RequestOutcome:
    """Ask the toolkit for `<cn>.key` and `<cn>.csr`; report, never raise, its status."""

    settings = settings or AppSettings()
    key_path, csr_path = record.output_paths(settings.output_dir)
    logger.info("Writing key to %s and CSR to %s", key_path, csr_path)

    command = build_openssl_command(
        record,
        key_path=key_path,
        csr_path=csr_path,
        binary=settings.openssl_binary,
    )
    returncode = runner(command)

    return RequestOutcome(
        key_path=key_path,
        csr_path=csr_path,
        subject=record.to_distinguished_name(),
        returncode=returncode,
    )
