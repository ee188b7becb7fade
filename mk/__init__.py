"""mk: create files or directories, making missing parents along the way.

The kind of entry is inferred from the path: a final segment with an
extension becomes a file, anything else a directory. Known script and
binary extensions are marked executable, and piped stdin is written into
created files.
"""

__version__ = "0.1.0"

from mk.exceptions import (
    AlreadyExistsError,
    InvalidArgumentError,
    MkError,
    MkIOError,
    PermissionDeniedError,
    TypeConflictError,
)
from mk.executables import EXECUTABLE_EXTENSIONS, is_executable_extension
from mk.executor import create_entry
from mk.intent import resolve_intent
from mk.models import CreationResult, EntryKind, Invocation

__all__ = [
    "__version__",
    "AlreadyExistsError",
    "InvalidArgumentError",
    "MkError",
    "MkIOError",
    "PermissionDeniedError",
    "TypeConflictError",
    "EXECUTABLE_EXTENSIONS",
    "is_executable_extension",
    "create_entry",
    "resolve_intent",
    "CreationResult",
    "EntryKind",
    "Invocation",
]
