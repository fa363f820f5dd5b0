from src.student_affairs.student_affairs.database.bootstrap import (
    _iter_sql_statements,
    _strip_create_db_and_use,
    seed_memory_store,
)
from src.student_affairs.student_affairs.database.memory_store import InMemoryRecordStore


def test_splitter_keeps_semicolons_inside_quotes_and_drops_comments():
    sql = """
    -- header comment; with semicolon
    INSERT INTO t VALUES ('a;b');
    CREATE TABLE x (id INT); -- trailing
    """

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        "CREATE TABLE x (id INT)",
    ]


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS kesiswaan_db;\nUSE kesiswaan_db;\nSELECT 1;"
    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["SELECT 1"]


def test_memory_seed_is_idempotent():
    store = InMemoryRecordStore()
    seed_memory_store(store)
    seed_memory_store(store)

    assert len(store.query("students")) == 3
    assert len(store.query("accounts")) == 2
    assert store.get("profiles", "00000000-0000-0000-0000-000000000002")["nis"] == "1001"
