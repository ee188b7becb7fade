"""Exception hierarchy for mk.

Every failure the tool can report is raised as a subclass of MkError. Each
class carries the process exit code the command line uses when that error
ends the run.

Exception Hierarchy:
    MkError (base, exit code 1)
    ├── InvalidArgumentError (exit code 2)
    ├── AlreadyExistsError (exit code 3)
    ├── TypeConflictError (exit code 4)
    ├── PermissionDeniedError (exit code 5)
    └── MkIOError (exit code 1)

Example:
    Catching a specific error::

        try:
            create_entry(Invocation(target_path="notes.txt"))
        except AlreadyExistsError as e:
            print(f"Refusing to overwrite {e.path}")

    Catching everything mk raises::

        try:
            create_entry(invocation)
        except MkError as e:
            sys.exit(e.exit_code)
"""

from pathlib import Path


class MkError(Exception):
    """Base exception for all mk errors.

    Attributes:
        message: Human-readable error description.
        path: The path the failing operation targeted (if known).
        exit_code: Process exit code used when this error ends a CLI run.
    """

    exit_code: int = 1

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            path: The path the failing operation targeted.
        """
        self.message = message
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including the path if available."""
        if self.path is not None:
            return f"{self.message} (path: {self.path})"
        return self.message


class InvalidArgumentError(MkError):
    """The invocation itself is invalid.

    Raised when both -f and -d are given, when the target path is empty or
    malformed, when -x is combined with a directory, or when stdin carries
    data for a directory.
    """

    exit_code = 2


class AlreadyExistsError(MkError):
    """The target path exists and overwrite was not requested."""

    exit_code = 3


class TypeConflictError(MkError):
    """An entry of the other kind is in the way.

    Raised when a directory is requested where a file exists, a file is
    requested where a directory exists, or an ancestor of the target is a
    file.

    Attributes:
        existing_kind: What was found at the conflicting path ("file" or
            "directory"), if known.
    """

    exit_code = 4

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        existing_kind: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            path: The conflicting path.
            existing_kind: What was found at the conflicting path.
        """
        self.existing_kind = existing_kind
        super().__init__(message, path)


class PermissionDeniedError(MkError):
    """The operating system refused to create the entry or change its mode."""

    exit_code = 5


class MkIOError(MkError):
    """Generic I/O failure while creating directories, files, or copying stdin.

    Attributes:
        cause: The underlying OSError.
    """

    exit_code = 1

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        cause: OSError | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            path: The path being operated on.
            cause: The underlying OSError.
        """
        self.cause = cause
        super().__init__(message, path)
