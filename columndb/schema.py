"""A named collection of tables persisted to disk, with a cache of join results."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Union

from columndb.column import Column, _read_length, _take
from columndb.table import Row, Table
from columndb.utils import DatabaseError, bytes_to_string, integer_to_bytes, string_to_bytes

SCHEMA_DIR = "schema"
INDEX_DIR = "index"

Index = dict[str, list[Row]]


@dataclass
class Schema:
    """A database: its tables, its cached join results and where it is stored."""

    name: str
    tables: list[Table] = field(default_factory=list)
    index: Index = field(default_factory=dict)
    root: Path = Path(".")

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    @property
    def schema_path(self) -> Path:
        """The file holding the encoded tables."""
        return self.root / SCHEMA_DIR / self.name

    @property
    def index_path(self) -> Path:
        """The file holding the cached join results."""
        return self.root / INDEX_DIR / self.name

    def to_bytes(self) -> bytes:
        """Encode the schema: name, table count, then the tables."""
        name_bytes = string_to_bytes(self.name)
        parts = [
            integer_to_bytes(len(name_bytes)),
            name_bytes,
            integer_to_bytes(len(self.tables)),
        ]
        parts.extend(table.to_bytes() for table in self.tables)
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, buf: bytes, root: Union[str, Path] = Path(".")) -> "Schema":
        """Decode a schema and load its index from the given root directory."""
        name_length, offset = _read_length(buf, 0)
        name_bytes, offset = _take(buf, offset, name_length)
        table_count, offset = _read_length(buf, offset)
        tables = []
        for _ in range(table_count):
            table, offset = Table.from_bytes(buf, offset)
            tables.append(table)
        schema = cls(bytes_to_string(name_bytes), tables, {}, Path(root))
        schema.build_index()
        return schema

    def save(self) -> None:
        """Write the schema file and clear the cached join results."""
        self.schema_path.parent.mkdir(parents=True, exist_ok=True)
        self.schema_path.write_bytes(self.to_bytes())
        self.clear_index()

    def create_table(self, table: Table) -> None:
        """Add a new table and save."""
        if self.table_index(table.name) is not None:
            raise DatabaseError("Table Already Exists")
        self.tables.append(table)
        self.save()

    def add_column_to_table(self, table_name: str, column: Column) -> None:
        """Add a column to a table, filling existing rows with defaults, and save."""
        table = self.search_table(table_name)
        column.rows = []
        for _ in range(table.length):
            column.insert_default_data()
        table.add_column(column)
        self.save()

    def list_column_on_table(self, name: str) -> list[str]:
        """Return the column names of a table."""
        return self.search_table(name).get_column_names()

    def delete_column_on_table(self, table_name: str, column_name: str) -> None:
        """Remove a column from a table and save."""
        self.search_table(table_name).delete_column(column_name)
        self.save()

    def search_table(self, name: str) -> Table:
        """Return the table with the given name."""
        found: Optional[Table] = None
        for table in self.tables:
            if table.name == name:
                found = table
        if found is None:
            raise DatabaseError("Table not Found")
        return found

    def table_index(self, name: str) -> Optional[int]:
        """Return the position of the named table, or None if there is none."""
        return next(
            (index for index, table in enumerate(self.tables) if table.name == name),
            None,
        )

    def drop_table(self, table_name: str) -> None:
        """Remove a table and save."""
        index = self.table_index(table_name)
        if index is None:
            raise DatabaseError("Table not Found")
        del self.tables[index]
        self.save()

    def add_data(self, table_name: str, data: Mapping[str, str]) -> None:
        """Append a row to a table and save."""
        self.search_table(table_name).add_data(data)
        self.save()

    def get_data(self, table_name: str) -> list[Row]:
        """Return every row of a table."""
        return self.search_table(table_name).get_data()

    def search_data(self, table_name: str, column_name: str, value: str) -> list[Row]:
        """Return the rows of a table whose column equals the given text."""
        return self.search_table(table_name).search_by_column(column_name, value)

    def update_data(
        self,
        table_name: str,
        where_data: Mapping[str, str],
        updated_data: Mapping[str, str],
    ) -> None:
        """Update matching rows of a table and save."""
        self.search_table(table_name).update_data(where_data, updated_data)
        self.save()

    def delete_data(self, table_name: str, where_data: Mapping[str, str]) -> None:
        """Delete matching rows of a table and save."""
        self.search_table(table_name).delete_data(where_data)
        self.save()

    def join_table(
        self,
        table_name: str,
        column_name: str,
        table_join: str,
        column_join: str,
        join_type: str,
    ) -> list[Row]:
        """Join two tables; join_type is "inner", "left" or "right"."""
        if join_type == "inner":
            return self.join_inner_table(table_name, column_name, table_join, column_join)
        if join_type == "left":
            return self.left_right_join_table(
                table_name, column_name, table_join, column_join
            )
        if join_type == "right":
            return self.left_right_join_table(
                table_join, column_join, table_name, column_name
            )
        raise DatabaseError("Invalid Join Type")

    def _matches(self, table: Table, column_join: str, row: Row, column_name: str) -> list[Row]:
        if column_name not in row:
            raise DatabaseError("Key not found")
        value = row[column_name]
        if value is None:
            return []
        return table.search_by_column(column_join, str(value))

    def left_right_join_table(
        self, table_name: str, column_name: str, table_join: str, column_join: str
    ) -> list[Row]:
        """Keep every row of the first table, merged with its first match if any."""
        rows = self.search_table(table_name).get_data()
        join = self.search_table(table_join)
        result = []
        for row in rows:
            matches = self._matches(join, column_join, row, column_name)
            merged: Row = dict(matches[0]) if matches else {}
            merged.update(row)
            result.append(merged)
        return result

    def join_inner_table(
        self, table_name: str, column_name: str, table_join: str, column_join: str
    ) -> list[Row]:
        """Return one merged row for every matching pair of rows."""
        rows = self.search_table(table_name).get_data()
        join = self.search_table(table_join)
        result = []
        for row in rows:
            for match in self._matches(join, column_join, row, column_name):
                merged = dict(match)
                merged.update(row)
                result.append(merged)
        return result

    def _write_index(self) -> None:
        self.index_path.parent.mkdir(parents=True, exist_ok=True)
        self.index_path.write_text(json.dumps(self.index), encoding="utf-8")

    def build_index(self) -> None:
        """Load the cached join results, creating an empty index file if missing."""
        path = self.index_path
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        raw = path.read_bytes()
        if not raw:
            self.index = {}
            return
        try:
            decoded = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as error:
            raise DatabaseError(f"corrupt index file: {path}") from error
        if not isinstance(decoded, dict):
            raise DatabaseError(f"corrupt index file: {path}")
        self.index = decoded

    def save_index(self, key: str, result: list[Row]) -> None:
        """Cache a join result under a key and write the index file."""
        self.index[key] = [dict(row) for row in result]
        self._write_index()

    def clear_index(self) -> None:
        """Drop every cached join result and write the empty index."""
        self.index = {}
        self._write_index()

    def list_all_table(self) -> list[str]:
        """Return the table names in order."""
        return [table.name for table in self.tables]

    def render(self) -> str:
        """Return a readable listing of the database and its tables."""
        lines = [f"Database {self.name!r}:"]
        lines.extend(table.render() for table in self.tables)
        lines.extend(["", ""])
        return "\n".join(lines)