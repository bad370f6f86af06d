"""csrgen: generate a private key and CSR by delegating to the openssl CLI."""

__version__ = "0.1.0"
