"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- The JSON subject file is validated straight into `SubjectRecord`, so a
  malformed or incomplete document never produces a partial record.
- Field metadata documents the contract in one place.

Note:
- The distinguished-name layout is fixed: `OU` repeats the common name and
  `emailAddress` carries the password, while `email` is stored but never
  emitted. Existing consumers depend on that exact string.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from csrgen.core.domain.errors import ConfigErrorKind, ConfigurationError

REQUIRED_FIELDS: tuple[str, ...] = (
    "country",
    "state_or_province",
    "locality",
    "org_name",
    "common_name",
)


class SubjectRecord(BaseModel):
    """Fully populated certificate subject.

    Invariant: the five required fields are always present and non-empty.
    """

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    country: str = Field(..., min_length=1, description="Country code (C).")
    state_or_province: str = Field(..., min_length=1, description="State or province (ST).")
    locality: str = Field(..., min_length=1, description="Locality / city (L).")
    org_name: str = Field(..., min_length=1, description="Organization name (O).")
    common_name: str = Field(
        ...,
        min_length=1,
        description="Common name (CN); also used for OU and the output file names.",
    )
    email: str | None = Field(default=None, description="Contact email (stored, not emitted).")
    password: str | None = Field(default=None, description="Rendered in the emailAddress slot.")

    @classmethod
    def from_raw(cls, raw: RawSubjectInput) -> SubjectRecord:
        """Build a record from individually supplied fields.

        Raises `ConfigurationError(INVALID_ARGUMENTS)` when any required field is
        missing or empty. Nothing is prompted for and nothing is defaulted.
        """

        missing = [name for name in REQUIRED_FIELDS if not getattr(raw, name)]
        if missing:
            flags = ", ".join("--" + name.replace("_", "-") for name in missing)
            raise ConfigurationError(ConfigErrorKind.INVALID_ARGUMENTS, f"missing {flags}")

        return cls(
            country=raw.country,
            state_or_province=raw.state_or_province,
            locality=raw.locality,
            org_name=raw.org_name,
            common_name=raw.common_name,
            email=raw.email,
            password=raw.password,
        )

    def to_distinguished_name(self) -> str:
        """Render the `-subj` string passed to openssl."""

        return (
            f"/C={self.country}"
            f"/ST={self.state_or_province}"
            f"/L={self.locality}"
            f"/O={self.org_name}"
            f"/OU={self.common_name}"
            f"/CN={self.common_name}"
            f"/emailAddress={self.password or ''}"
        )

    def output_paths(self, directory: Path | None = None) -> tuple[Path, Path]:
        """Return `(key_path, csr_path)` derived from the common name.

        Existing files with the same name are overwritten by the toolkit.
        """

        base = directory if directory is not None else Path(".")
        return base / f"{self.common_name}.key", base / f"{self.common_name}.csr"


class RawSubjectInput(BaseModel):
    """Loosely typed bag of CLI flags; every field is optional."""

    from_file: Path | None = None
    country: str | None = None
    state_or_province: str | None = None
    locality: str | None = None
    org_name: str | None = None
    common_name: str | None = None
    email: str | None = None
    password: str | None = None
