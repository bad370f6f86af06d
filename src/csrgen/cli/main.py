"""csrgen CLI.

Collects the certificate subject from flags or a JSON file and asks openssl
for a private key and CSR. The toolkit's exit status is printed, never
escalated; only resolution and spawn failures make csrgen itself exit non-zero.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from csrgen.adapters.openssl_runner import describe_exit_status
from csrgen.cli.logging_setup import configure_logging
from csrgen.cli.ui_components import build_outcome_table
from csrgen.core.config import AppSettings
from csrgen.core.domain.errors import CsrGenError
from csrgen.core.domain.models import RawSubjectInput
from csrgen.core.services.request_pipeline import generate_csr
from csrgen.core.services.resolver import resolve_subject

app = typer.Typer(
    add_completion=False,
    help="Generate a private key and certificate signing request with openssl.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@app.command()
def generate(
    from_file: Path | None = typer.Option(
        None,
        "--from-file",
        help="JSON file with the subject fields. Takes precedence over every other field flag.",
    ),
    country: str | None = typer.Option(None, "--country", help="Country code (C)."),
    state_or_province: str | None = typer.Option(
        None, "--state-or-province", help="State or province (ST)."
    ),
    locality: str | None = typer.Option(None, "--locality", help="Locality (L)."),
    org_name: str | None = typer.Option(None, "--org-name", help="Organization name (O)."),
    common_name: str | None = typer.Option(
        None, "--common-name", help="Common name (CN); also names the output files."
    ),
    email: str | None = typer.Option(None, "--email", help="Contact email (not emitted)."),
    password: str | None = typer.Option(
        None, "--password", help="Rendered in the emailAddress slot of the subject."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Resolve the subject and run `openssl req -newkey rsa:2048 -nodes`."""

    settings = AppSettings()
    configure_logging(logging.DEBUG if verbose else settings.log_level)

    raw = RawSubjectInput(
        from_file=from_file,
        country=country,
        state_or_province=state_or_province,
        locality=locality,
        org_name=org_name,
        common_name=common_name,
        email=email,
        password=password,
    )

    try:
        record = resolve_subject(raw)
        outcome = generate_csr(record, settings)
    except CsrGenError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    _console.print(f"Process exited with: {describe_exit_status(outcome.returncode)}")
    _console.print(build_outcome_table(outcome))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
