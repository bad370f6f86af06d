"""Core of csrgen.

Why:
- Holds the domain (subject record, errors), configuration and services.
- Knows nothing about typer or rich; the CLI layer depends on it, never the reverse.
"""
