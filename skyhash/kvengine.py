"""The in-memory key/value engine that backs a table."""

from __future__ import annotations

import threading
from typing import Callable, Optional, Union

from .encoding import is_utf8

BytesLike = Union[bytes, bytearray, memoryview, str]
DoubleEncoder = Callable[[bytes, bytes], bool]
SingleEncoder = Callable[[bytes], bool]


class EncodingError(ValueError):
    """Raised when a key or value fails the table's UTF-8 requirement."""


class TableNotEmptyError(Exception):
    """Raised when a table definition is altered while the table holds data."""


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _accept_one(_data: bytes) -> bool:
    return True


def _accept_two(_key: bytes, _value: bytes) -> bool:
    return True


class KVEngine:
    """A thread-safe binary key/value table with optional UTF-8 enforcement.

    ``encoded_k`` and ``encoded_v`` say whether keys and values must be valid
    UTF-8. Operations given data that fails the check raise EncodingError.
    """

    def __init__(
        self,
        encoded_k: bool = False,
        encoded_v: bool = False,
        table: Optional[dict] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._table: dict[bytes, bytes] = {}
        if table:
            for key, value in table.items():
                self._table[_to_bytes(key)] = _to_bytes(value)
        self._encoded_k = bool(encoded_k)
        self._encoded_v = bool(encoded_v)

    def __repr__(self) -> str:
        return (
            f"KVEngine(encoded_k={self._encoded_k}, encoded_v={self._encoded_v}, "
            f"len={len(self)})"
        )

    def encoding(self) -> tuple[bool, bool]:
        """Return the ``(encoded_k, encoded_v)`` switches."""
        with self._lock:
            return self._encoded_k, self._encoded_v

    def get_encoder(self) -> DoubleEncoder:
        """Return a validator for a key and a value, following the current switches."""
        encoded_k, encoded_v = self.encoding()
        if encoded_k and encoded_v:
            return lambda key, value: is_utf8(key) and is_utf8(value)
        if encoded_k:
            return lambda key, _value: is_utf8(key)
        if encoded_v:
            return lambda _key, value: is_utf8(value)
        return _accept_two

    def get_key_encoder(self) -> SingleEncoder:
        """Return a validator for keys."""
        return is_utf8 if self.encoding()[0] else _accept_one

    def get_value_encoder(self) -> SingleEncoder:
        """Return a validator for values."""
        return is_utf8 if self.encoding()[1] else _accept_one

    def __len__(self) -> int:
        with self._lock:
            return len(self._table)

    def _alter(self, attribute: str, flag: bool) -> None:
        with self._lock:
            if self._table:
                raise TableNotEmptyError("the table must be empty to alter its encoding")
            setattr(self, attribute, bool(flag))

    def alter_table_key(self, encoded_k: bool) -> None:
        """Set the key encoding switch; the table must be empty."""
        self._alter("_encoded_k", encoded_k)

    def alter_table_value(self, encoded_v: bool) -> None:
        """Set the value encoding switch; the table must be empty."""
        self._alter("_encoded_v", encoded_v)

    def _check_key(self, key: BytesLike) -> bytes:
        data = _to_bytes(key)
        if self._encoded_k and not is_utf8(data):
            raise EncodingError("key is not valid UTF-8")
        return data

    def _check_value(self, value: BytesLike) -> bytes:
        data = _to_bytes(value)
        if self._encoded_v and not is_utf8(data):
            raise EncodingError("value is not valid UTF-8")
        return data

    def take_snapshot(self, key: BytesLike) -> Optional[bytes]:
        """Return the value of ``key`` without any encoding check, or None."""
        with self._lock:
            return self._table.get(_to_bytes(key))

    def truncate_table(self) -> None:
        """Remove every record."""
        with self._lock:
            self._table.clear()

    def get(self, key: BytesLike) -> Optional[bytes]:
        """Return the value of ``key``, or None if it does not exist."""
        with self._lock:
            return self._table.get(self._check_key(key))

    def exists(self, key: BytesLike) -> bool:
        """Return whether ``key`` exists."""
        with self._lock:
            return self._check_key(key) in self._table

    def set(self, key: BytesLike, value: BytesLike) -> bool:
        """Insert a new key; return False if it already exists."""
        with self._lock:
            k = self._check_key(key)
            v = self._check_value(value)
            if k in self._table:
                return False
            self._table[k] = v
            return True

    def update(self, key: BytesLike, value: BytesLike) -> bool:
        """Update an existing key; return False if it does not exist."""
        with self._lock:
            k = self._check_key(key)
            v = self._check_value(value)
            if k not in self._table:
                return False
            self._table[k] = v
            return True

    def upsert(self, key: BytesLike, value: BytesLike) -> None:
        """Insert or update a key."""
        with self._lock:
            k = self._check_key(key)
            self._table[k] = self._check_value(value)

    def remove(self, key: BytesLike) -> bool:
        """Remove a key; return whether it existed."""
        with self._lock:
            k = self._check_key(key)
            if k in self._table:
                del self._table[k]
                return True
            return False

    def pop(self, key: BytesLike) -> Optional[tuple[bytes, bytes]]:
        """Remove a key and return ``(key, value)``, or None if it did not exist."""
        with self._lock:
            k = self._check_key(key)
            if k not in self._table:
                return None
            return k, self._table.pop(k)