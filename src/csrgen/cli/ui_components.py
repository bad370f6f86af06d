"""UI components for the CLI (Rich).

Why separate:
- Keeps command logic apart from presentation details.
- Tables are reused by `csrgen` and `csrgen-doctor`.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from csrgen.core.services.request_pipeline import RequestOutcome

_EMAIL_SLOT = "/emailAddress="


def mask_subject(subject: str) -> str:
    """Hide the emailAddress value, which holds the password."""

    head, sep, tail = subject.rpartition(_EMAIL_SLOT)
    if not sep or not tail:
        return subject
    return f"{head}{sep}***"


def build_outcome_table(outcome: RequestOutcome) -> Table:
    table = Table(title="CSR request")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Subject", Text(mask_subject(outcome.subject)))
    table.add_row("Private key", Text(str(outcome.key_path)))
    table.add_row("CSR", Text(str(outcome.csr_path)))
    table.add_row(
        "Toolkit",
        "[green]OK[/green]" if outcome.succeeded else f"[red]FAILED ({outcome.returncode})[/red]",
    )
    return table
