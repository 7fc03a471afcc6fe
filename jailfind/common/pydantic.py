"""Pydantic models."""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfig


class FrozenBaseModel(BaseModel):
    """Pydantic frozen base model."""

    model_config = ConfigDict(frozen=True, strict=True)


class SearchMode(StrEnum):
    """Allowed search modes."""

    PLAIN_FIND = "find"
    FINDER_ALIAS = "finder"


class LocatorConfig(BaseModel):
    """Locator configuration."""

    # Not strict: values arrive as strings from JSON files and the command line.
    model_config = ConfigDict(frozen=True, strict=False)

    root_directory: Path = Field(description="Directory no search may escape.")
    search_mode: SearchMode = Field(default=SearchMode.PLAIN_FIND, description="Which search command to emit.")
    timeout_seconds: int = Field(default=60, gt=0, description="Maximum run time of a search command.")

    @field_validator("root_directory", mode="before")
    @classmethod
    def _reject_empty_root(cls, value: object) -> object:
        """Reject an empty root, which would otherwise mean the working directory."""
        if isinstance(value, str | Path) and not str(value).strip():
            raise ValueError("root directory must not be empty")
        return value

    @field_validator("root_directory")
    @classmethod
    def _canonical_root(cls, value: Path) -> Path:
        """Resolve the root to an existing directory."""
        try:
            resolved = value.expanduser().resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise ValueError(f"root directory does not exist: {value}") from e
        if not resolved.is_dir():
            raise ValueError(f"root directory is not a directory: {value}")
        return resolved

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def _reject_bool_timeout(cls, value: object) -> object:
        """Reject booleans masquerading as integers."""
        if isinstance(value, bool):
            raise ValueError("timeout must be an integer number of seconds")
        return value

    @classmethod
    def create(cls, **values: object) -> "LocatorConfig":
        """Validate a configuration, raising ``InvalidConfig`` on failure."""
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise InvalidConfig(_describe(e)) from e

    @classmethod
    def from_json(cls, text: str) -> "LocatorConfig":
        """Validate a JSON configuration document."""
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise InvalidConfig(_describe(e)) from e

    def updated(self, **changes: object) -> "LocatorConfig":
        """Return a revalidated copy with ``changes`` applied."""
        return self.create(**{**self.model_dump(), **changes})


class FileEntry(FrozenBaseModel):
    """Metadata for a located path."""

    path: str
    filename: str
    realpath: str
    extension: str
    type: str
    mime_type: str
    size: int
    is_file: bool
    is_dir: bool
    is_link: bool
    writable: bool
    readable: bool
    executable: bool


def _describe(error: ValidationError) -> str:
    """Flatten a validation error into one line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "config"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
