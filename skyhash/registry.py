"""Process-wide state: system health, the flush lock and the preload trip switch."""

from __future__ import annotations

import threading


class Trip:
    """A thread-safe switch that can be tripped and reset."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tripped = False

    def trip(self) -> None:
        with self._lock:
            self._tripped = True

    def untrip(self) -> None:
        with self._lock:
            self._tripped = False

    def is_tripped(self) -> bool:
        with self._lock:
            return self._tripped

    def check_and_untrip(self) -> bool:
        """Reset the switch and return whether it was tripped, atomically."""
        with self._lock:
            previous = self._tripped
            self._tripped = False
            return previous


class _FlushGuard:
    """Holds the global flush lock until released."""

    def __init__(self, lock: threading.Lock) -> None:
        self._lock = lock
        self._lock.acquire()
        self.held = True

    def release(self) -> None:
        if self.held:
            self.held = False
            self._lock.release()

    def __enter__(self) -> _FlushGuard:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()


_STATE_LOCK = threading.Lock()
_global_state_okay = True
_FLUSH_STATE = threading.Lock()
_PRELOAD_TRIPSWITCH = Trip()


def state_okay() -> bool:
    """Return whether the system is healthy."""
    with _STATE_LOCK:
        return _global_state_okay


def poison() -> None:
    """Mark the system as unhealthy."""
    global _global_state_okay
    with _STATE_LOCK:
        _global_state_okay = False


def unpoison() -> None:
    """Mark the system as healthy."""
    global _global_state_okay
    with _STATE_LOCK:
        _global_state_okay = True


def lock_flush_state() -> _FlushGuard:
    """Acquire the global flush lock, blocking; release the returned guard when done."""
    return _FlushGuard(_FLUSH_STATE)


def get_preload_tripswitch() -> Trip:
    """Return the global preload trip switch."""
    return _PRELOAD_TRIPSWITCH