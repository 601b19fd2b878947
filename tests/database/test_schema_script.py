from __future__ import annotations

from pathlib import Path

from src.rrhh_system.rrhh_system.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splitter_respects_quotes_and_comments():
    sql = """
    -- seed; not a statement
    INSERT INTO t(name) VALUES('a;b');
    INSERT INTO t(name) VALUES("it\\'s");
    SELECT 1
    """
    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t(name) VALUES('a;b')",
        "INSERT INTO t(name) VALUES(\"it\\'s\")",
        "SELECT 1",
    ]


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE a (id INT);"
    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE a (id INT)"]


def test_schema_file_splits_into_create_statements():
    statements = list(_iter_sql_statements(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))))
    assert statements
    assert all(s.upper().startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    assert any("rrhh_payroll_parameters" in s for s in statements)
