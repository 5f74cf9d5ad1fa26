"""A message-oriented front end that reports each operation as text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from columndb.interface import DatabaseInterface


def _report(ok: bool, success: str, failure: str) -> str:
    return success if ok else failure


@dataclass
class DatabaseConnection:
    """Wraps a database interface and answers with status messages."""

    db_interface: DatabaseInterface = field(default_factory=DatabaseInterface)

    def select_database(self, database_name: str) -> str:
        return _report(
            self.db_interface.select_database(database_name),
            "Connected to database",
            "Database not found",
        )

    def create_database(self, database_name: str) -> str:
        return _report(
            self.db_interface.create_database(database_name),
            "Database Created!",
            "Database Failed to create",
        )

    def drop_database(self, database_name: str) -> str:
        return _report(
            self.db_interface.drop_database(database_name),
            "Database Dropped!",
            "Failed to Drop Database",
        )

    def list_table(self) -> list[str]:
        return self.db_interface.list_all_table()

    def create_table(self, table_name: str) -> str:
        return _report(
            self.db_interface.create_table(table_name, []),
            "Table Created",
            "Failed to create table",
        )

    def drop_table(self, table_name: str) -> str:
        return _report(
            self.db_interface.drop_table(table_name),
            "Table Dropped",
            "Failed to drop table",
        )

    def add_column(self, table_name: str, name: str, data_type: str) -> str:
        return _report(
            self.db_interface.add_column_to_table(table_name, name, data_type),
            "Column Created",
            "Failed to create column",
        )

    def list_column(self, table_name: str) -> list[str]:
        return self.db_interface.list_column_on_table(table_name)

    def delete_column(self, table_name: str, column_name: str) -> str:
        return _report(
            self.db_interface.delete_column_on_table(table_name, column_name),
            "Column Deleted",
            "Failed to delete column",
        )

    def add_data(self, table_name: str, data: Mapping[str, str]) -> str:
        return _report(
            self.db_interface.add_data(table_name, data),
            "Data Created",
            "Failed to create data",
        )

    def update_data(
        self,
        table_name: str,
        where_data: Mapping[str, str],
        updated_data: Mapping[str, str],
    ) -> str:
        return _report(
            self.db_interface.update_data(table_name, where_data, updated_data),
            "Data Updated",
            "Failed to update data",
        )

    def delete_data(self, table_name: str, where_data: Mapping[str, str]) -> str:
        return _report(
            self.db_interface.delete_data(table_name, where_data),
            "Data Deleted",
            "Failed to delete data",
        )