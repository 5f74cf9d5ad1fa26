# columndb

A small column-oriented database engine. Each database is stored as one binary
file. A table keeps its data column by column, and each column holds string or
integer cells. Join results are cached in a JSON index file for each database.
The cache is cleared every time the database is saved.

## Installation

```
pip install .
```

## Storage layout

`DatabaseInterface` takes a `root` directory. It defaults to the current
directory. Under that root:

- `schema/<database>` holds the serialized database.
- `index/<database>` holds the cached join results as JSON.

The engine creates these directories the first time it saves a database.
`show_databases()` lists the entries in `schema/`. If that directory does not
exist yet, it raises `DatabaseError`.

## Usage

```python
from columndb.interface import DatabaseInterface

db = DatabaseInterface(root="data")
db.create_database("articles")
db.select_database("articles")      # True; False if the database does not exist

db.create_table("users", [])
db.add_column_to_table("users", "id", "integer")
db.add_column_to_table("users", "first_name", "string")

db.add_data("users", {"id": "0", "first_name": "Farhan"})
db.add_data("users", {"id": "1", "first_name": "Akbar"})

db.get_data("users")
# [{'id': 0, 'first_name': 'Farhan'}, {'id': 1, 'first_name': 'Akbar'}]
db.search_data("users", "id", "1")
# [{'id': 1, 'first_name': 'Akbar'}]

db.update_data("users", {"id": "0"}, {"first_name": "Hanif"})
db.delete_data("users", {"id": "1"})

print(db.render())
```

### Tables and columns

- You can give columns when you create a table, for example
  `create_table("users", [{"name": "id", "type": "integer"}])`, or you can add
  them later with `add_column_to_table`.
- A column type is `"string"` or `"integer"`.
- When you add a column to a table that already has rows, each existing row
  gets the column's default value.
- Other table and column operations: `list_all_table()`, `drop_table()`,
  `list_column_on_table()` and `delete_column_on_table()`.
- `drop_database()` removes both of a database's files.

### Values

- You pass row values in as strings. Each value is converted to the type of
  its column.
- Integers are stored as signed 64-bit values.
- Strings are stored one byte per character. Only characters up to U+00FF keep
  their value.
- A column that a row leaves out gets its default value: `0` for an integer
  column and `""` for a string column.

### Updating and deleting rows

`update_data` and `delete_data` go through the conditions one at a time. They
act on every row that matches any one condition.

### Joins

```python
db.join_table("users", "id", "posts", "user_id", "inner")
```

The join type is one of `"inner"`, `"left"` or `"right"`.

- `"inner"` returns one merged row for each matching pair of rows.
- `"left"` keeps every row of the first table and merges in the first match, if
  there is one. When both tables have a column of the same name, the value from
  the first table wins.
- `"right"` does the same with the two tables swapped.

Each result is cached under a key built from the arguments, until the next
write to the database.

### Lower-level pieces

You can use `columndb.schema.Schema`, `columndb.table.Table`,
`columndb.column.Column` and `columndb.cell.Cell` directly. Each of `Schema`,
`Table` and `Column` has `to_bytes()` and `from_bytes()` for the binary format.

### Message-style front end

`columndb.connection.DatabaseConnection` wraps a `DatabaseInterface`. Its
methods return status messages, such as `"Table Created"` or `"Data Deleted"`.

```python
from columndb.connection import DatabaseConnection
from columndb.interface import DatabaseInterface

conn = DatabaseConnection(DatabaseInterface(root="data"))
conn.create_database("library")               # "Database Created!"
conn.select_database("library")               # "Connected to database"
conn.create_table("books")                    # "Table Created"
conn.add_column("books", "title", "string")   # "Column Created"
conn.list_column("books")                     # ["title"]
```

## Errors

When an operation cannot go ahead, the engine raises
`columndb.utils.DatabaseError`. Some of the cases:

- no database is selected
- a table or column is missing, or already exists
- a column type or join type is not valid
- an integer value cannot be parsed
- stored data is truncated or corrupt

## What it does not do

The package is a library used in-process. It has no command-line program, and
it does not run as a server. `DatabaseConnection` is an ordinary Python object
and is not exposed over any message bus or network.

## Running the tests

```
pip install .[test]
pytest
```