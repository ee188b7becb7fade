"""Filesystem executor.

Turns a validated Invocation into a file or directory on disk. Every
OSError raised along the way is translated into the matching MkError
subclass so the command line can report it with the right exit code.

Nothing is rolled back on failure: ancestor directories created before an
error stay in place, as with ``mkdir -p``.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from mk.exceptions import (
    AlreadyExistsError,
    InvalidArgumentError,
    MkIOError,
    PermissionDeniedError,
    TypeConflictError,
)
from mk.executables import is_executable_extension, make_executable
from mk.intent import extension_of, resolve_intent
from mk.models import CreationResult, EntryKind, Invocation

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 64 * 1024


@contextmanager
def _translate_os_errors(path: Path, action: str) -> Iterator[None]:
    """Re-raise OSErrors from the wrapped block as MkErrors."""
    try:
        yield
    except PermissionError as exc:
        raise PermissionDeniedError(f"Permission denied while {action}", path) from exc
    except (FileExistsError, NotADirectoryError, IsADirectoryError) as exc:
        raise TypeConflictError(
            f"Conflicting entry in the way while {action}", path
        ) from exc
    except OSError as exc:
        raise MkIOError(
            f"Failed {action}: {exc.strerror or exc}", path, cause=exc
        ) from exc


def _entry_exists(path: Path) -> bool:
    # Dangling symlinks count as existing entries.
    return path.exists() or path.is_symlink()


def _kind_of_blocker(path: Path) -> str:
    # Only called for entries that exist but are not directories.
    if path.is_symlink() and not path.exists():
        return "symlink"
    return EntryKind.FILE.value


def _missing_ancestors(path: Path) -> list[Path]:
    """Return the ancestors of path that do not exist yet, outermost first.

    Raises:
        TypeConflictError: If the nearest existing ancestor is not a directory.
    """
    missing: list[Path] = []
    for ancestor in path.parents:
        if _entry_exists(ancestor):
            if not ancestor.is_dir():
                raise TypeConflictError(
                    "Ancestor exists and is not a directory",
                    ancestor,
                    existing_kind=_kind_of_blocker(ancestor),
                )
            break
        missing.append(ancestor)
    missing.reverse()
    return missing


def ensure_ancestors(path: Path) -> list[Path]:
    """Create every missing ancestor directory of path.

    Args:
        path: The entry whose parents must exist.

    Returns:
        The directories that were created, outermost first.

    Raises:
        TypeConflictError: If an ancestor exists as a file.
        PermissionDeniedError: If the OS refuses to create a directory.
        MkIOError: For any other failure.
    """
    with _translate_os_errors(path.parent, "checking parent directories"):
        missing = _missing_ancestors(path)
    if missing:
        logger.debug("Creating parent directories: %s", ", ".join(map(str, missing)))
        with _translate_os_errors(path.parent, "creating parent directories"):
            path.parent.mkdir(parents=True, exist_ok=True)
    return missing


def _stdin_has_data(stdin: Optional[BinaryIO]) -> bool:
    if stdin is None:
        return False
    return bool(stdin.read(1))


def _copy_stream(source: BinaryIO, target: BinaryIO) -> int:
    written = 0
    for chunk in iter(lambda: source.read(COPY_CHUNK_SIZE), b""):
        target.write(chunk)
        written += len(chunk)
    return written


def create_directory(
    path: Path, invocation: Invocation, stdin: Optional[BinaryIO] = None
) -> CreationResult:
    """Create a directory at path.

    An existing directory is accepted as a no-op when overwrite is set; the
    existence check against overwrite happens in create_entry.

    Raises:
        InvalidArgumentError: If the invocation asks for an executable
            directory or stdin carries data.
        TypeConflictError: If a file exists at path or at an ancestor.
    """
    if invocation.executable:
        raise InvalidArgumentError("Cannot make directory executable", path)
    with _translate_os_errors(path, "reading stdin"):
        if _stdin_has_data(stdin):
            raise InvalidArgumentError("Cannot create directory with stdin data", path)

    with _translate_os_errors(path, "checking existing entries"):
        if path.is_dir():
            logger.debug("Directory %s already exists, nothing to do", path)
            return CreationResult(path=path, kind=EntryKind.DIRECTORY, created=False)
        if _entry_exists(path):
            raise TypeConflictError(
                "Cannot create directory: a file exists at this path",
                path,
                existing_kind=_kind_of_blocker(path),
            )

    parents = ensure_ancestors(path)
    with _translate_os_errors(path, "creating directory"):
        path.mkdir()
    return CreationResult(
        path=path, kind=EntryKind.DIRECTORY, created_parents=parents
    )


def create_file(
    path: Path, invocation: Invocation, stdin: Optional[BinaryIO] = None
) -> CreationResult:
    """Create or truncate a file at path, filling it from stdin if given.

    The executable bits are set when the extension is in the executable
    table or the invocation forces it.

    Raises:
        TypeConflictError: If a directory exists at path or a file at an ancestor.
        PermissionDeniedError: If the OS refuses the write or the chmod.
        MkIOError: For any other failure, including errors reading stdin.
    """
    with _translate_os_errors(path, "checking existing entries"):
        if path.is_dir():
            raise TypeConflictError(
                "Cannot create file: a directory exists at this path",
                path,
                existing_kind=EntryKind.DIRECTORY.value,
            )

    parents = ensure_ancestors(path)
    written = 0
    with _translate_os_errors(path, "writing file"):
        with path.open("wb") as handle:
            if stdin is not None:
                written = _copy_stream(stdin, handle)

    executable = invocation.executable or is_executable_extension(extension_of(path))
    if executable:
        with _translate_os_errors(path, "setting executable permissions"):
            make_executable(path)

    return CreationResult(
        path=path,
        kind=EntryKind.FILE,
        executable=executable,
        bytes_written=written,
        created_parents=parents,
    )


def create_entry(
    invocation: Invocation,
    root: Optional[Path] = None,
    stdin: Optional[BinaryIO] = None,
) -> CreationResult:
    """Create the file or directory an invocation describes.

    Args:
        invocation: Validated request.
        root: Directory relative targets are resolved against (defaults to
            the current working directory).
        stdin: Binary stream to copy into a created file, or None when there
            is no piped input.

    Returns:
        CreationResult describing what was made.

    Raises:
        MkError: One of its subclasses, depending on what went wrong.
    """
    kind = resolve_intent(
        invocation.target_path,
        force_file=invocation.force_file,
        force_dir=invocation.force_dir,
    )
    with _translate_os_errors(Path(invocation.target_path), "checking existing entries"):
        base = Path(root) if root is not None else Path.cwd()
        path = base / invocation.target_path
        exists = _entry_exists(path)

    if exists and not invocation.overwrite:
        raise AlreadyExistsError(
            f"Entry {invocation.target_path} already exists", path
        )

    if kind is EntryKind.DIRECTORY:
        result = create_directory(path, invocation, stdin)
    else:
        result = create_file(path, invocation, stdin)

    logger.info(result.get_summary())
    return result
