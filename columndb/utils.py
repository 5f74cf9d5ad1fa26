"""Shared definitions and helpers for encoding stored values."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Mapping, Optional, Union

if TYPE_CHECKING:
    from columndb.column import Column

INTEGER_SIZE = 8
"""Width in bytes of every stored integer and length prefix."""

Value = Optional[Union[str, int]]
"""A decoded cell value: a string, an integer, or None for NULL."""


class DataType(enum.Enum):
    """The type of a column or of a single cell."""

    STRING = "string"
    INTEGER = "integer"
    NULL = "null"


class DatabaseError(Exception):
    """Raised when a database operation cannot be carried out."""


def bytes_to_string(data: bytes) -> str:
    """Decode bytes into a string, one character per byte."""
    return bytes(data).decode("latin-1")


def string_to_bytes(word: str) -> bytes:
    """Encode a string as bytes, keeping the low eight bits of each character."""
    return bytes(ord(char) & 0xFF for char in word)


def integer_to_bytes(num: int) -> bytes:
    """Encode a signed integer as eight little-endian bytes."""
    return num.to_bytes(INTEGER_SIZE, "little", signed=True)


def bytes_to_integer(data: bytes) -> int:
    """Decode eight little-endian bytes into a signed integer."""
    if len(data) != INTEGER_SIZE:
        raise DatabaseError(
            f"an integer needs exactly {INTEGER_SIZE} bytes, got {len(data)}"
        )
    return int.from_bytes(data, "little", signed=True)


def parse_new_column(column: Mapping[str, str]) -> "Column":
    """Build an empty column from a mapping with "name" and "type" keys."""
    from columndb.column import Column

    if "name" not in column:
        raise DatabaseError("Please input key name!")
    if "type" not in column:
        raise DatabaseError("Please input key data type!")
    type_name = column["type"]
    if type_name == "string":
        data_type = DataType.STRING
    elif type_name == "integer":
        data_type = DataType.INTEGER
    else:
        raise DatabaseError("Incorrect Type")
    return Column(name=column["name"], data_type=data_type)