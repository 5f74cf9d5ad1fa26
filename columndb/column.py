"""A named, typed column of cells and its binary encoding."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from columndb.cell import Cell
from columndb.utils import (
    INTEGER_SIZE,
    DatabaseError,
    DataType,
    Value,
    bytes_to_string,
    integer_to_bytes,
    string_to_bytes,
)

_TYPE_TAGS = {DataType.STRING: 0, DataType.INTEGER: 1}
_TYPES_BY_TAG = {tag: data_type for data_type, tag in _TYPE_TAGS.items()}
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INTEGER_MIN = -(2**63)
_INTEGER_MAX = 2**63 - 1


def _parse_integer(text: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise DatabaseError(f"invalid integer: {text!r}")
    number = int(text)
    if not _INTEGER_MIN <= number <= _INTEGER_MAX:
        raise DatabaseError(f"integer out of range: {text!r}")
    return number


def _encode(value: Value, null_bytes: bytes) -> bytes:
    if value is None:
        return null_bytes
    if isinstance(value, str):
        return string_to_bytes(value)
    return integer_to_bytes(value)


def _take(buf: bytes, offset: int, size: int) -> tuple[bytes, int]:
    end = offset + size
    if end > len(buf):
        raise DatabaseError("unexpected end of data")
    return bytes(buf[offset:end]), end


def _read_length(buf: bytes, offset: int) -> tuple[int, int]:
    raw, offset = _take(buf, offset, INTEGER_SIZE)
    return int.from_bytes(raw, "little", signed=False), offset


@dataclass
class Column:
    """A named column holding one cell per row."""

    name: str
    data_type: DataType
    rows: list[Cell] = field(default_factory=list)

    def insert_data(self, value: Value) -> None:
        """Append a value; None is stored as eight zero bytes."""
        data = _encode(value, bytes(INTEGER_SIZE))
        self.rows.append(Cell(self.data_type, data))

    def insert_default_data(self) -> None:
        """Append the column type's default value."""
        if self.data_type is DataType.INTEGER:
            data = integer_to_bytes(0)
        elif self.data_type is DataType.STRING:
            data = string_to_bytes("")
        else:
            raise DatabaseError("Not Supported Yet!")
        self.rows.append(Cell(self.data_type, data))

    def update_data(self, index: int, value: Value) -> None:
        """Replace the value at a row; None empties the cell."""
        self.rows[index].change_value(_encode(value, b""))

    def search_for_index(self, value: str) -> list[int]:
        """Return the row indices whose value equals the given text."""
        found = []
        for index, row in enumerate(self.rows):
            current = row.value()
            if isinstance(current, str):
                if current == value:
                    found.append(index)
            elif isinstance(current, int):
                if _parse_integer(value) == current:
                    found.append(index)
        return found

    def delete(self, index: int) -> Cell:
        """Remove the row at the given index and return its cell."""
        return self.rows.pop(index)

    def to_bytes(self) -> bytes:
        """Encode the column: row count, name, type tag, then the cells."""
        name_bytes = string_to_bytes(self.name)
        parts = [
            integer_to_bytes(len(self.rows)),
            integer_to_bytes(len(name_bytes)),
            name_bytes,
        ]
        if self.data_type in _TYPE_TAGS:
            parts.append(bytes([_TYPE_TAGS[self.data_type]]))
        for cell in self.rows:
            if cell.data_type is DataType.STRING:
                parts.append(integer_to_bytes(len(cell.data_value)))
            parts.append(cell.data_value)
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, buf: bytes, offset: int = 0) -> tuple["Column", int]:
        """Decode a column starting at offset; return it and the offset past it."""
        row_count, offset = _read_length(buf, offset)
        name_length, offset = _read_length(buf, offset)
        name_bytes, offset = _take(buf, offset, name_length)
        tag, offset = _take(buf, offset, 1)
        data_type = _TYPES_BY_TAG.get(tag[0])
        if data_type is None:
            raise DatabaseError("Something went wrong on parsing bytes to table")

        rows = []
        for _ in range(row_count):
            if data_type is DataType.STRING:
                size, offset = _read_length(buf, offset)
            else:
                size = INTEGER_SIZE
            data, offset = _take(buf, offset, size)
            rows.append(Cell(data_type, data))
        return cls(bytes_to_string(name_bytes), data_type, rows), offset