"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
import shutil
import subprocess

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from csrgen.core.config import AppSettings

app = typer.Typer(add_completion=False, help="Environment diagnostics for csrgen.")

_console = Console()


def _check_binary(binary: str) -> tuple[bool, str]:
    path = shutil.which(binary)
    if path is None:
        return False, f"{binary!r} not found on PATH"
    return True, path


def _check_version(binary: str) -> tuple[bool, str]:
    try:
        completed = subprocess.run(
            [binary, "version"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        return False, str(exc)
    output = (completed.stdout or completed.stderr).strip()
    return completed.returncode == 0, output or f"exit status: {completed.returncode}"


@app.command()
def run() -> None:
    """Check that the toolkit is runnable and the output directory is writable."""

    settings = AppSettings()

    table = Table(title="csrgen doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_bin, detail_bin = _check_binary(settings.openssl_binary)
    table.add_row("Toolkit binary", "OK" if ok_bin else "FAIL", Text(detail_bin))

    if ok_bin:
        ok_ver, detail_ver = _check_version(settings.openssl_binary)
        table.add_row("Toolkit version", "OK" if ok_ver else "FAIL", Text(detail_ver))

    out_dir = settings.output_dir
    writable = out_dir.is_dir() and os.access(out_dir, os.W_OK)
    table.add_row("Output directory", "OK" if writable else "FAIL", Text(str(out_dir.resolve())))

    _console.print(table)

    if not ok_bin:
        _console.print(
            "\n[yellow]Note:[/yellow] install OpenSSL or set CSRGEN_OPENSSL_BINARY to its path."
        )
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
