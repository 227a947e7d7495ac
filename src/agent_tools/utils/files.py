"""
File helpers that keep text byte-for-byte.

Reads disable newline translation so CRLF files round-trip unchanged,
and writes go through a temporary file plus ``os.replace`` so readers
never observe a half-written file.
"""

import contextlib as _contextlib
import os as _os
import pathlib as _pathlib
import stat as _stat
import tempfile as _tempfile


def read_text_exact(path: _pathlib.Path) -> str:
    """
    Read a UTF-8 text file without newline translation.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def atomic_write_text(path: _pathlib.Path, content: str) -> None:
    """
    Replace the contents of ``path`` with ``content`` in one step.

    The new text is written to a temporary file in the same directory
    and renamed over the target. Permission bits of an existing target
    are carried over to the new file.

    Raises:
        OSError: If the temporary file cannot be written or renamed.
    """
    try:
        mode: int | None = _stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        mode = None

    fd, temp_name = _tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with _os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            _os.fsync(f.fileno())
        if mode is not None:
            _os.chmod(temp_name, mode)
        _os.replace(temp_name, path)
    except BaseException:
        with _contextlib.suppress(OSError):
            _os.unlink(temp_name)
        raise
