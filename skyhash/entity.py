"""Parsing of entity names such as ``keyspace`` or ``keyspace:table``."""

from __future__ import annotations

import re

from . import responses

_VALID_CONTAINER_NAME = re.compile(rb"[a-zA-Z_$][a-zA-Z_$0-9]*")
_MAX_NAME_LENGTH = 64
_SYSTEM_KEYSPACE = b"system"


class QueryError(Exception):
    """Raised when a query is malformed; ``response`` is the response element to send."""

    def __init__(self, response: bytes) -> None:
        super().__init__(response)
        self.response = response


def is_valid_container_name(name: bytes | bytearray | str) -> bool:
    """Return whether ``name`` is a valid keyspace or table identifier."""
    if isinstance(name, str):
        name = name.encode("utf-8")
    return _VALID_CONTAINER_NAME.fullmatch(bytes(name)) is not None


def get_query_entity(data: bytes | bytearray | str) -> tuple[bytes, bytes | None]:
    """Split an entity into ``(keyspace, table)``; ``table`` is None when absent.

    Raises QueryError carrying the response element that describes the problem.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    parts = bytes(data).split(b":")
    if len(parts) == 1:
        (keyspace,) = parts
        if not keyspace or len(keyspace) > _MAX_NAME_LENGTH:
            raise QueryError(responses.BAD_CONTAINER_NAME)
        if not is_valid_container_name(keyspace):
            raise QueryError(responses.BAD_EXPRESSION)
        if keyspace == _SYSTEM_KEYSPACE:
            raise QueryError(responses.PROTECTED_OBJECT)
        return keyspace, None
    if len(parts) == 2:
        keyspace, table = parts
        if len(keyspace) > _MAX_NAME_LENGTH or len(table) > _MAX_NAME_LENGTH:
            raise QueryError(responses.BAD_CONTAINER_NAME)
        if not keyspace or not table:
            raise QueryError(responses.BAD_EXPRESSION)
        if not (is_valid_container_name(keyspace) and is_valid_container_name(table)):
            raise QueryError(responses.BAD_CONTAINER_NAME)
        if keyspace == _SYSTEM_KEYSPACE:
            raise QueryError(responses.PROTECTED_OBJECT)
        return keyspace, table
    raise QueryError(responses.BAD_EXPRESSION)