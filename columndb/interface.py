"""The session-level entry point: choosing a database and working on it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from columndb.schema import INDEX_DIR, SCHEMA_DIR, Schema
from columndb.table import Row, Table
from columndb.utils import DatabaseError, parse_new_column


@dataclass
class DatabaseInterface:
    """Holds the selected database and forwards operations to it."""

    root: Union[str, Path] = Path(".")
    database: Optional[Schema] = None

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    @property
    def is_connect(self) -> bool:
        """Whether a database is currently selected."""
        return self.database is not None

    def _require(self) -> Schema:
        if self.database is None:
            raise DatabaseError("Please select database first!")
        return self.database

    def show_databases(self) -> list[str]:
        """Return the names of every stored database."""
        directory = Path(self.root) / SCHEMA_DIR
        try:
            return sorted(entry.name for entry in directory.iterdir())
        except OSError as error:
            raise DatabaseError("Something went Wrong!") from error

    def select_database(self, database_name: str) -> bool:
        """Load a database; return False if it does not exist."""
        path = Path(self.root) / SCHEMA_DIR / database_name
        try:
            buf = path.read_bytes()
        except FileNotFoundError:
            return False
        except OSError as error:
            raise DatabaseError("Something went wrong") from error
        self.database = Schema.from_bytes(buf, Path(self.root))
        return True

    def create_database(self, database_name: str) -> bool:
        """Create and save an empty database."""
        Schema(database_name, root=Path(self.root)).save()
        return True

    def drop_database(self, database_name: str) -> bool:
        """Delete a database's files; return False if either is missing."""
        root = Path(self.root)
        try:
            (root / SCHEMA_DIR / database_name).unlink()
        except OSError:
            return False
        if self.database is not None and self.database.name == database_name:
            self.database = None
        try:
            (root / INDEX_DIR / database_name).unlink()
        except OSError:
            return False
        return True

    def list_all_table(self) -> list[str]:
        """Return the table names of the selected database."""
        return self._require().list_all_table()

    def create_table(
        self, table_name: str, columns: Iterable[Mapping[str, str]]
    ) -> bool:
        """Create a table from column descriptions with "name" and "type" keys."""
        table = Table(table_name)
        for description in columns:
            table.add_column(parse_new_column(description))
        if self.database is None:
            raise DatabaseError("Please Connect to database")
        self.database.create_table(table)
        return True

    def drop_table(self, table_name: str) -> bool:
        """Remove a table from the selected database."""
        self._require().drop_table(table_name)
        return True

    def add_column_to_table(self, table_name: str, name: str, data_type: str) -> bool:
        """Add a column of type "string" or "integer" to a table."""
        database = self._require()
        column = parse_new_column({"name": name, "type": data_type})
        database.add_column_to_table(table_name, column)
        return True

    def list_column_on_table(self, table_name: str) -> list[str]:
        """Return the column names of a table."""
        return self._require().list_column_on_table(table_name)

    def delete_column_on_table(self, table_name: str, column_name: str) -> bool:
        """Remove a column from a table."""
        self._require().delete_column_on_table(table_name, column_name)
        return True

    def add_data(self, table_name: str, data: Mapping[str, str]) -> bool:
        """Append a row of text values to a table."""
        self._require().add_data(table_name, data)
        return True

    def get_data(self, table_name: str) -> list[Row]:
        """Return every row of a table."""
        return self._require().get_data(table_name)

    def search_data(self, table_name: str, column_name: str, value: str) -> list[Row]:
        """Return the rows of a table whose column equals the given text."""
        return self._require().search_data(table_name, column_name, value)

    def update_data(
        self,
        table_name: str,
        where_data: Mapping[str, str],
        updated_data: Mapping[str, str],
    ) -> bool:
        """Update the rows of a table that match the conditions."""
        self._require().update_data(table_name, where_data, updated_data)
        return True

    def delete_data(self, table_name: str, where_data: Mapping[str, str]) -> bool:
        """Delete the rows of a table that match the conditions."""
        self._require().delete_data(table_name, where_data)
        return True

    def join_table(
        self,
        table_name: str,
        column_name: str,
        table_join: str,
        column_join: str,
        join_type: str,
    ) -> list[Row]:
        """Join two tables, serving the result from the index when cached."""
        database = self._require()
        key = f"{table_name}_{column_name}_{table_join}_{column_join}_{join_type}"
        if key not in database.index:
            result = database.join_table(
                table_name, column_name, table_join, column_join, join_type
            )
            database.save_index(key, result)
        return database.index.get(key, [])

    def render(self) -> str:
        """Return a readable listing of the selected database."""
        return self._require().render()