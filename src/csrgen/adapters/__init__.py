"""Adapters: I/O at the edges (JSON subject files, the openssl subprocess)."""

from csrgen.adapters.openssl_runner import (
    build_openssl_command,
    describe_exit_status,
    run_openssl,
)
from csrgen.adapters.subject_file import load_subject_file

__all__ = [
    "build_openssl_command",
    "describe_exit_status",
    "load_subject_file",
    "run_openssl",
]
