"""A single stored value together with its type."""

from __future__ import annotations

from dataclasses import dataclass

from columndb.utils import DataType, Value, bytes_to_integer, bytes_to_string


@dataclass
class Cell:
    """One encoded value of a column."""

    data_type: DataType
    data_value: bytes

    def value(self) -> Value:
        """Decode the stored bytes according to the cell's type."""
        if self.data_type is DataType.STRING:
            return bytes_to_string(self.data_value)
        if self.data_type is DataType.INTEGER:
            return bytes_to_integer(self.data_value)
        return None

    def change_value(self, data: bytes) -> None:
        """Replace the stored bytes."""
        self.data_value = bytes(data)

    def __str__(self) -> str:
        if self.data_type is DataType.NULL:
            return "NULL"
        return repr(self.value())