"""Parsing of the arguments to ``create table``."""

from __future__ import annotations

from typing import Union

from . import responses
from .encoding import is_utf8
from .entity import QueryError, get_query_entity, is_valid_container_name

BytesLike = Union[bytes, bytearray, memoryview, str]

_KEYMAP = "keymap"
_MODEL_CODES = {
    ("binstr", "binstr"): 0,
    ("binstr", "str"): 1,
    ("str", "str"): 2,
    ("str", "binstr"): 3,
}


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def parse_table_args(
    table_name: BytesLike, model_name: BytesLike
) -> tuple[tuple[bytes, bytes | None], int]:
    """Parse ``<tableid> keymap(<ktype>, <vtype>)``.

    Return the entity ``(keyspace, table)`` and the model code. Raises
    QueryError carrying the response element that describes the problem.
    """
    table_bytes = _to_bytes(table_name)
    model_bytes = _to_bytes(model_name)
    if not is_utf8(table_bytes) or not is_utf8(model_bytes):
        raise QueryError(responses.ENCODING_ERROR)
    try:
        model = model_bytes.decode("utf-8")
    except UnicodeDecodeError:
        raise QueryError(responses.ENCODING_ERROR) from None

    entity = get_query_entity(table_bytes)

    splits = model.split("(")
    if len(splits) != 2:
        raise QueryError(responses.BAD_EXPRESSION)
    name, args = splits
    if not name or not args:
        raise QueryError(responses.BAD_EXPRESSION)
    if name != _KEYMAP:
        raise QueryError(responses.UNKNOWN_MODEL)
    if not args.endswith(")"):
        raise QueryError(responses.BAD_EXPRESSION)

    model_args = [arg.strip() for arg in args[:-1].split(",")]
    if len(model_args) != 2:
        if all(model_args):
            raise QueryError(responses.TOO_MANY_ARGUMENTS)
        raise QueryError(responses.BAD_EXPRESSION)
    key_ty, val_ty = model_args
    if not (is_valid_container_name(key_ty) and is_valid_container_name(val_ty)):
        raise QueryError(responses.BAD_EXPRESSION)
    try:
        code = _MODEL_CODES[(key_ty, val_ty)]
    except KeyError:
        raise QueryError(responses.UNKNOWN_DATA_TYPE) from None
    return entity, code