"""A named table made of parallel columns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from columndb.column import Column, _parse_integer, _read_length, _take
from columndb.utils import (
    DatabaseError,
    DataType,
    Value,
    bytes_to_string,
    integer_to_bytes,
    string_to_bytes,
)

Row = dict[str, Value]


@dataclass
class Table:
    """A table whose rows are spread across its columns, one cell per column."""

    name: str
    columns: list[Column] = field(default_factory=list)
    length: int = 0

    def _convert(self, column: Column, text: str) -> Value:
        if column.data_type is DataType.STRING:
            return text
        if column.data_type is DataType.INTEGER:
            return _parse_integer(text)
        raise DatabaseError("Not Supported Yet!")

    def _row(self, index: int) -> Row:
        return {column.name: column.rows[index].value() for column in self.columns}

    def get_column_names(self) -> list[str]:
        """Return the column names in order."""
        return [column.name for column in self.columns]

    def get_data(self) -> list[Row]:
        """Return every row as a mapping from column name to value."""
        return [self._row(index) for index in range(self.length)]

    def search_by_column(self, column_name: str, search: str) -> list[Row]:
        """Return the rows whose value in the named column equals the text."""
        column = self.search_column(column_name)
        found = []
        for index in range(self.length):
            current = column.rows[index].value()
            if isinstance(current, str):
                matched = current == search
            elif isinstance(current, int):
                matched = _parse_integer(search) == current
            else:
                matched = False
            if matched:
                found.append(self._row(index))
        return found

    def search_column(self, name: str) -> Column:
        """Return the column with the given name."""
        index = self.column_index(name)
        if index is None:
            raise DatabaseError(f"{name!r}, Column not Found")
        return self.columns[index]

    def column_index(self, name: str) -> Optional[int]:
        """Return the position of the named column, or None if there is none."""
        return next(
            (index for index, column in enumerate(self.columns) if column.name == name),
            None,
        )

    def add_column(self, column: Column) -> None:
        """Append a column; its name must be new to the table."""
        if self.column_index(column.name) is not None:
            raise DatabaseError("Column Already Exists")
        self.columns.append(column)

    def add_data_column(self, name: str, value: Value) -> None:
        """Append a value to the named column only, counting it as a new row."""
        for column in self.columns:
            if column.name == name:
                column.insert_data(value)
                self.length += 1
                break

    def add_data(self, input_data: Mapping[str, str]) -> None:
        """Append a row from text values; missing columns get their default."""
        values = [
            (column, self._convert(column, input_data[column.name]))
            if column.name in input_data
            else (column, None)
            for column in self.columns
        ]
        for column, value in values:
            if column.name in input_data:
                column.insert_data(value)
            else:
                column.insert_default_data()
        self.length += 1

    def update(self, index: int, values: Mapping[str, str]) -> None:
        """Set the given text values on one row; unknown column names are ignored."""
        for key, text in values.items():
            position = self.column_index(key)
            if position is None:
                continue
            column = self.columns[position]
            column.update_data(index, self._convert(column, text))

    def delete_column(self, column_name: str) -> None:
        """Remove the named column."""
        index = self.column_index(column_name)
        if index is None:
            raise DatabaseError("Column not Found")
        del self.columns[index]

    def delete(self, index: int) -> None:
        """Remove one row from every column."""
        for column in self.columns:
            column.delete(index)
        self.length -= 1

    def update_data(
        self, where_data: Mapping[str, str], updated_data: Mapping[str, str]
    ) -> None:
        """Update every row matching any of the conditions, one condition at a time."""
        for column_name, text in where_data.items():
            column = self.search_column(column_name)
            for index in column.search_for_index(text):
                self.update(index, updated_data)

    def delete_data(self, where_data: Mapping[str, str]) -> None:
        """Delete every row matching any of the conditions, one condition at a time."""
        for column_name, text in where_data.items():
            column = self.search_column(column_name)
            matches = column.search_for_index(text)
            for removed, index in enumerate(matches):
                self.delete(index - removed)

    def to_bytes(self) -> bytes:
        """Encode the table: name, column count, row count, then the columns."""
        name_bytes = string_to_bytes(self.name)
        parts = [
            integer_to_bytes(len(name_bytes)),
            name_bytes,
            integer_to_bytes(len(self.columns)),
            integer_to_bytes(self.length),
        ]
        parts.extend(column.to_bytes() for column in self.columns)
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, buf: bytes, offset: int = 0) -> tuple["Table", int]:
        """Decode a table starting at offset; return it and the offset past it."""
        name_length, offset = _read_length(buf, offset)
        name_bytes, offset = _take(buf, offset, name_length)
        column_count, offset = _read_length(buf, offset)
        length, offset = _read_length(buf, offset)
        columns = []
        for _ in range(column_count):
            column, offset = Column.from_bytes(buf, offset)
            columns.append(column)
        return cls(bytes_to_string(name_bytes), columns, length), offset

    def render(self) -> str:
        """Return a readable listing of the table's columns and rows."""
        lines = [
            f"===Table {self.name!r}===",
            f"Column: {self.get_column_names()!r}",
        ]
        for index in range(self.length):
            lines.append(f"Data {index + 1}:")
            lines.extend(str(column.rows[index]) for column in self.columns)
            lines.append("")
        lines.extend(["", ""])
        return "\n".join(lines)