"""Decide whether a target path names a file or a directory.

The heuristic only looks at the final path segment:

- ``notes.txt``, ``example.com.txt``, ``.env.local`` have an extension and
  resolve to files.
- ``build``, ``.gitignore``, ``.env``, ``notes.`` have none and resolve to
  directories. A leading dot marks a hidden entry, not an extension.
- A trailing separator (``docs.v2/``) always means a directory.

The -f and -d flags bypass the heuristic entirely.
"""

import logging
import os
from pathlib import PurePath

from mk.exceptions import InvalidArgumentError
from mk.models import EntryKind

logger = logging.getLogger(__name__)

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep, "/") if sep)


def has_extension(name: str) -> bool:
    """Return True if a path segment carries a file extension.

    The last dot must sit after the first character and be followed by at
    least one character.
    """
    dot = name.rfind(".")
    return 0 < dot < len(name) - 1


def extension_of(path: str | PurePath) -> str | None:
    """Return the lowercased extension of the final segment, without the dot."""
    name = PurePath(path).name
    if not has_extension(name):
        return None
    return name.rsplit(".", 1)[1].lower()


def resolve_intent(
    target_path: str, force_file: bool = False, force_dir: bool = False
) -> EntryKind:
    """Resolve the kind of entry to create at target_path.

    Args:
        target_path: Path exactly as the user gave it.
        force_file: Create a file regardless of the heuristic.
        force_dir: Create a directory regardless of the heuristic.

    Returns:
        EntryKind.FILE or EntryKind.DIRECTORY.

    Raises:
        InvalidArgumentError: If both flags are set or the path is empty.
    """
    if force_file and force_dir:
        raise InvalidArgumentError("Cannot force both file and directory", target_path)
    if not target_path:
        raise InvalidArgumentError("Target path must not be empty")
    if force_file:
        return EntryKind.FILE
    if force_dir:
        return EntryKind.DIRECTORY

    if target_path.endswith(_SEPARATORS):
        logger.debug("%s ends with a separator, treating as directory", target_path)
        return EntryKind.DIRECTORY

    name = PurePath(target_path).name
    kind = EntryKind.FILE if has_extension(name) else EntryKind.DIRECTORY
    logger.debug("Inferred %s for %s", kind.value, target_path)
    return kind
