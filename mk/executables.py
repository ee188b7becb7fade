"""Executable extension table and permission helper."""

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


EXECUTABLE_EXTENSIONS: frozenset[str] = frozenset(
    {
        # Windows
        "exe", "bat", "cmd", "com", "ps1", "vbs", "msi", "scr",
        # Unix-like
        "sh", "bash", "zsh", "ksh", "run", "bin", "cgi", "py", "pl", "rb", "php",
        # Cross-platform
        "jar", "appimage", "apk", "wasm", "pyz",
    }
)


def is_executable_extension(extension: str | None) -> bool:
    """Return True if files with this extension should be marked executable.

    Args:
        extension: Extension with or without the leading dot, in any case.

    Returns:
        True iff the extension is in EXECUTABLE_EXTENSIONS.
    """
    if not extension:
        return False
    return extension.lstrip(".").lower() in EXECUTABLE_EXTENSIONS


def make_executable(path: Path) -> None:
    """Add execute bits wherever the file already has read bits.

    Mirrors ``chmod +x`` under a typical umask: a 0o644 file becomes 0o755,
    a 0o600 file becomes 0o700. Does nothing on platforms without POSIX
    permission bits.

    Raises:
        OSError: If the mode cannot be read or changed.
    """
    if os.name == "nt":
        logger.debug("Skipping chmod on %s: no POSIX permission bits", path)
        return
    mode = path.stat().st_mode
    read_bits = mode & (stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH)
    new_mode = stat.S_IMODE(mode) | (read_bits >> 2)
    logger.debug("Setting mode of %s to %o", path, new_mode)
    path.chmod(new_mode)
