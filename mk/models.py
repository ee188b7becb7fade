"""Data models for a single mk invocation."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class EntryKind(str, Enum):
    """Kind of filesystem entry an invocation creates."""

    FILE = "file"
    DIRECTORY = "directory"


class Invocation(BaseModel):
    """One request to create a filesystem entry.

    Built from command line arguments, or directly when mk is used as a
    library. Flag combinations are validated here so the executor only ever
    sees consistent requests.

    Args:
        target_path: Path to create, relative to the working directory or absolute.
        force_file: Create a file regardless of the extension heuristic.
        force_dir: Create a directory regardless of the extension heuristic.
        overwrite: Allow the target to already exist.
        executable: Mark the created file executable regardless of its extension.
    """

    target_path: str = Field(description="Path to create")
    force_file: bool = Field(
        default=False, description="Create a file regardless of the extension"
    )
    force_dir: bool = Field(
        default=False, description="Create a directory regardless of the extension"
    )
    overwrite: bool = Field(
        default=False, description="Allow the target to already exist"
    )
    executable: bool = Field(
        default=False, description="Force the created file to be executable"
    )

    @field_validator("target_path")
    @classmethod
    def validate_target_path(cls, value: str) -> str:
        """Validate the target path is usable.

        Args:
            value: Raw path string.

        Returns:
            The validated path string.

        Raises:
            ValueError: If the path is empty or contains a NUL byte.
        """
        if not value:
            raise ValueError("Target path must not be empty")
        if "\x00" in value:
            raise ValueError("Target path must not contain NUL bytes")
        return value

    @model_validator(mode="after")
    def validate_flags(self) -> "Invocation":
        """Validate that the forcing flags do not contradict each other.

        Raises:
            ValueError: If both file and directory are forced, or if a
                directory is forced to be executable.
        """
        if self.force_file and self.force_dir:
            raise ValueError("Cannot force both file and directory")
        if self.force_dir and self.executable:
            raise ValueError("Cannot make directory executable")
        return self


class CreationResult(BaseModel):
    """Outcome of a successful invocation.

    Args:
        path: Absolute path of the entry.
        kind: Whether a file or a directory was made.
        created: False when an existing directory was accepted as a no-op.
        executable: Whether the executable bits were set.
        bytes_written: Number of bytes copied from stdin into the file.
        created_parents: Ancestor directories that did not exist before the run.
    """

    path: Path
    kind: EntryKind
    created: bool = True
    executable: bool = False
    bytes_written: int = 0
    created_parents: list[Path] = Field(default_factory=list)

    def get_summary(self) -> str:
        """Return a one-line description suitable for logging."""
        if not self.created:
            return f"Directory {self.path} already exists"
        summary = f"Created {self.kind.value} {self.path}"
        if self.bytes_written:
            summary += f" ({self.bytes_written} bytes)"
        if self.executable:
            summary += " [executable]"
        return summary
