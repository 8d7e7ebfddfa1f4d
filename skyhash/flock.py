"""Advisory, non-blocking exclusive file locks."""

from __future__ import annotations

import os
import sys
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

if sys.platform == "win32":
    import msvcrt

    # msvcrt locks a byte range starting at the current position
    _LOCK_RANGE = 0x7FFFFFFF

    def _try_lock_ex(fd: int) -> None:
        os.lseek(fd, 0, os.SEEK_SET)
        msvcrt.locking(fd, msvcrt.LK_NBLCK, _LOCK_RANGE)

    def _unlock(fd: int) -> None:
        os.lseek(fd, 0, os.SEEK_SET)
        msvcrt.locking(fd, msvcrt.LK_UNLCK, _LOCK_RANGE)

else:
    import fcntl

    def _try_lock_ex(fd: int) -> None:
        fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)

    def _unlock(fd: int) -> None:
        fcntl.flock(fd, fcntl.LOCK_UN)


class FileLock:
    """An exclusive lock held on an open file.

    The lock is taken with :meth:`lock`, which fails at once with an
    ``OSError`` if another holder has the file locked. Unlocking is explicit;
    a second :meth:`unlock` does nothing. Used as a context manager, the lock
    is released and the file closed on exit.
    """

    def __init__(self, fd: int, unlocked: bool = False) -> None:
        self._fd: Optional[int] = fd
        self._unlocked = unlocked

    @classmethod
    def lock(cls, filename: PathLike) -> FileLock:
        """Open (creating if needed) and exclusively lock ``filename`` without blocking."""
        flags = os.O_RDWR | os.O_CREAT | getattr(os, "O_BINARY", 0)
        fd = os.open(os.fspath(filename), flags, 0o644)
        try:
            _try_lock_ex(fd)
        except BaseException:
            os.close(fd)
            raise
        return cls(fd)

    @property
    def unlocked(self) -> bool:
        """Whether :meth:`unlock` has already released the lock."""
        return self._unlocked

    @property
    def closed(self) -> bool:
        return self._fd is None

    def _require_fd(self) -> int:
        if self._fd is None:
            raise ValueError("operation on a closed file lock")
        return self._fd

    def unlock(self) -> None:
        """Release the lock; does nothing if it was already released."""
        if self._unlocked:
            return
        _unlock(self._require_fd())
        self._unlocked = True

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Replace the whole content of the file with ``data``."""
        fd = self._require_fd()
        os.ftruncate(fd, 0)
        os.lseek(fd, 0, os.SEEK_SET)
        view = memoryview(bytes(data))
        while view:
            written = os.write(fd, view)
            view = view[written:]

    def fsync(self) -> None:
        """Flush data and metadata of the file to disk."""
        os.fsync(self._require_fd())

    def try_clone(self) -> FileLock:
        """Return a second handle sharing this file and its lock."""
        return FileLock(os.dup(self._require_fd()), self._unlocked)

    def close(self) -> None:
        """Close the file handle; the lock is not explicitly released."""
        if self._fd is not None:
            fd, self._fd = self._fd, None
            os.close(fd)

    def __enter__(self) -> FileLock:
        return self

    def __exit__(self, *args: object) -> None:
        try:
            if self._fd is not None:
                self.unlock()
        finally:
            self.close()

    def __repr__(self) -> str:
        state = "closed" if self._fd is None else ("unlocked" if self._unlocked else "locked")
        return f"<FileLock {state}>"