import pytest

from columndb.interface import DatabaseInterface
from columndb.utils import DatabaseError

USERS = [
    {"id": "0", "first_name": "Farhan", "last_name": "Abdul"},
    {"id": "1", "first_name": "Akbar", "last_name": "Maulana"},
    {"id": "2", "first_name": "Daffa", "last_name": "Haryadi"},
    {"id": "3", "first_name": "Hanif", "last_name": "Ramadhan"},
    {"id": "4", "first_name": "Rudiansyah", "last_name": "Wijaya"},
]

POSTS = [
    ("0", "0", "Maxime fugit voluptatem dolor et qui voluptate."),
    ("1", "0", "Consequatur aut deserunt libero voluptas beatae recusandae excepturi libero."),
    ("2", "1", "Sed architecto consequuntur rerum beatae."),
    ("3", "2", "Ut quo aut debitis totam."),
    ("4", "2", "Harum quo iste illo quaerat."),
    ("5", "2", "Ut et eos eos suscipit."),
    ("6", "3", "Totam quidem cum reprehenderit rerum et consequatur soluta."),
    ("7", "2", "Tenetur libero dolorem voluptatem incidunt laudantium."),
    ("8", "2", "Et minima ex tempore voluptatem aliquam et quibusdam."),
    ("9", "2", "Et possimus eum aliquam."),
    ("10", "1", "Cum et autem ut laudantium eum quas."),
    ("11", "1", "Lorem ipsum dolor sit amet consectetur, adipisicing elit."),
    ("12", "2", "Aut sunt excepturi facere a at molestiae recusandae sed."),
]


def _connect(root):
    interface = DatabaseInterface(root=root)
    assert interface.select_database("articles")
    return interface


@pytest.fixture
def articles(tmp_path):
    assert DatabaseInterface(root=tmp_path).create_database("articles")
    _connect(tmp_path).create_table("users", [])
    for name, kind in [("id", "integer"), ("first_name", "string"), ("last_name", "string")]:
        assert _connect(tmp_path).add_column_to_table("users", name, kind)
    for item in USERS:
        assert _connect(tmp_path).add_data("users", item)
    _connect(tmp_path).create_table("posts", [])
    for name, kind in [
        ("id", "integer"),
        ("user_id", "integer"),
        ("title", "string"),
        ("description", "string"),
    ]:
        assert _connect(tmp_path).add_column_to_table("posts", name, kind)
    for post_id, user_id, description in POSTS:
        item = {
            "id": post_id,
            "user_id": user_id,
            "title": f"Judul {post_id}",
            "description": description,
        }
        assert _connect(tmp_path).add_data("posts", item)
    return tmp_path


def test_select_missing_database(tmp_path):
    interface = DatabaseInterface(root=tmp_path)
    assert interface.select_database("articles") is False
    assert interface.is_connect is False


def test_show_databases(tmp_path):
    interface = DatabaseInterface(root=tmp_path)
    interface.create_database("articles")
    interface.create_database("library")
    assert interface.show_databases() == ["articles", "library"]


def test_show_databases_without_directory(tmp_path):
    with pytest.raises(DatabaseError):
        DatabaseInterface(root=tmp_path).show_databases()


def test_list_tables(articles):
    interface = _connect(articles)
    assert interface.is_connect
    assert interface.list_all_table() == ["users", "posts"]


def test_list_columns(articles):
    interface = _connect(articles)
    assert interface.list_column_on_table("posts") == [
        "id",
        "user_id",
        "title",
        "description",
    ]


def test_get_data(articles):
    rows = _connect(articles).get_data("users")
    assert rows[0] == {"id": 0, "first_name": "Farhan", "last_name": "Abdul"}
    assert [row["first_name"] for row in rows] == [
        "Farhan",
        "Akbar",
        "Daffa",
        "Hanif",
        "Rudiansyah",
    ]
    assert len(_connect(articles).get_data("posts")) == 13


def test_update_data(articles):
    interface = _connect(articles)
    assert interface.update_data(
        "users",
        {"id": "0", "first_name": "Farhan"},
        {"last_name": "Abdul Hamid"},
    )
    rows = _connect(articles).get_data("users")
    assert rows[0]["last_name"] == "Abdul Hamid"
    assert rows[1]["last_name"] == "Maulana"


def test_search_data(articles):
    result = _connect(articles).search_data("users", "id", "0")
    assert result == [{"id": 0, "first_name": "Farhan", "last_name": "Abdul"}]


def test_join_right(articles):
    result = _connect(articles).join_table("users", "id", "posts", "user_id", "right")
    assert len(result) == 13
    assert result[6]["first_name"] == "Hanif"
    assert result[6]["id"] == 6
    assert result[6]["title"] == "Judul 6"


def test_join_inner(articles):
    result = _connect(articles).join_table("users", "id", "posts", "user_id", "inner")
    assert len(result) == 13
    assert all(row["id"] == row["user_id"] for row in result)
    assert "Rudiansyah" not in {row["first_name"] for row in result}


def test_join_left_keeps_unmatched(articles):
    result = _connect(articles).join_table("users", "id", "posts", "user_id", "left")
    assert len(result) == 5
    assert result[4] == {"id": 4, "first_name": "Rudiansyah", "last_name": "Wijaya"}
    assert result[0]["title"] == "Judul 0"


def test_join_result_is_cached_until_save(articles):
    key = "users_id_posts_user_id_right"
    first = _connect(articles).join_table("users", "id", "posts", "user_id", "right")
    reopened = _connect(articles)
    assert key in reopened.database.index
    assert reopened.database.index[key] == first
    reopened.add_data("users", {"id": "5", "first_name": "Budi"})
    assert _connect(articles).database.index == {}


def test_invalid_join_type(articles):
    with pytest.raises(DatabaseError):
        _connect(articles).join_table("users", "id", "posts", "user_id", "outer")


def test_delete_data(articles):
    assert _connect(articles).delete_data("users", {"first_name": "Rudiansyah"})
    rows = _connect(articles).get_data("users")
    assert len(rows) == 4
    assert "Rudiansyah" not in [row["first_name"] for row in rows]


def test_delete_several_matches(articles):
    _connect(articles).delete_data("posts", {"user_id": "2"})
    rows = _connect(articles).get_data("posts")
    assert len(rows) == 6
    assert all(row["user_id"] != 2 for row in rows)


def test_add_column_fills_existing_rows(articles):
    interface = _connect(articles)
    interface.add_column_to_table("users", "age", "integer")
    interface.add_column_to_table("users", "nickname", "string")
    rows = _connect(articles).get_data("users")
    assert all(row["age"] == 0 and row["nickname"] == "" for row in rows)


def test_add_column_bad_type(articles):
    with pytest.raises(DatabaseError):
        _connect(articles).add_column_to_table("users", "age", "float")


def test_delete_column(articles):
    assert _connect(articles).delete_column_on_table("users", "last_name")
    assert _connect(articles).list_column_on_table("users") == ["id", "first_name"]


def test_create_table_with_columns(tmp_path):
    interface = DatabaseInterface(root=tmp_path)
    interface.create_database("articles")
    interface.select_database("articles")
    columns = [
        {"name": "id", "type": "integer"},
        {"name": "first_name", "type": "string"},
        {"name": "last_name", "type": "string"},
    ]
    assert interface.create_table("users", columns)
    assert _connect(tmp_path).list_column_on_table("users") == [
        "id",
        "first_name",
        "last_name",
    ]


def test_create_existing_table(articles):
    with pytest.raises(DatabaseError):
        _connect(articles).create_table("users", [])


def test_drop_table(articles):
    assert _connect(articles).drop_table("posts")
    assert _connect(articles).list_all_table() == ["users"]
    with pytest.raises(DatabaseError):
        _connect(articles).drop_table("posts")


def test_operations_need_database(tmp_path):
    interface = DatabaseInterface(root=tmp_path)
    with pytest.raises(DatabaseError):
        interface.list_all_table()
    with pytest.raises(DatabaseError):
        interface.create_table("users", [])
    with pytest.raises(DatabaseError):
        interface.get_data("users")


def test_integer_column_rejects_text(articles):
    with pytest.raises(DatabaseError):
        _connect(articles).add_data("users", {"id": "abc"})


def test_drop_database(articles):
    interface = _connect(articles)
    assert interface.drop_database("articles")
    assert interface.is_connect is False
    assert DatabaseInterface(root=articles).select_database("articles") is False
    assert interface.drop_database("articles") is False


def test_render(articles):
    text = _connect(articles).render()
    assert text.startswith("Database 'articles':")
    assert "===Table 'users'===" in text
    assert "'Rudiansyah'" in text