"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets the adapters (openssl runner) and the CLI read the same settings.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "csrgen"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "csrgen"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "csrgen"
    return Path.home() / ".config" / "csrgen"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, .env) instead of ad-hoc `os.environ` reads.
    - One configuration contract shared by the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CSRGEN_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    openssl_binary: str = Field(
        default="openssl",
        min_length=1,
        description="Name or path of the openssl executable.",
    )
    output_dir: Path = Field(
        default=Path("."),
        description="Directory where <common_name>.key and <common_name>.csr are written.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Logging level when --verbose is not given (DEBUG, INFO, WARNING...).",
    )
