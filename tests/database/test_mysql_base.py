from __future__ import annotations

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.rrhh_system.rrhh_system.core.exceptions import DuplicateError
from src.rrhh_system.rrhh_system.database.mysql_base import db_cursor, is_duplicate_key


class FakeCursor:
    def __init__(self, error=None):
        self.error = error
        self.closed = False
        self.statements = []

    def execute(self, sql, params=None):
        self.statements.append(sql)
        if self.error:
            raise self.error

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.calls = []

    def cursor(self, dictionary=True):
        self.calls.append("cursor")
        return self._cursor

    def commit(self):
        self.calls.append("commit")

    def rollback(self):
        self.calls.append("rollback")

    def close(self):
        self.calls.append("close")


class FakeFactory:
    def __init__(self, error=None):
        self.cursor = FakeCursor(error)
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn


def _duplicate():
    return mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)


def test_success_commits_and_closes():
    factory = FakeFactory()
    with db_cursor(factory) as (_, cur):
        cur.execute("UPDATE t SET a=1")

    assert factory.conn.calls == ["cursor", "commit", "close"]
    assert factory.cursor.closed


def test_duplicate_key_becomes_duplicate_error_after_rollback():
    factory = FakeFactory(error=_duplicate())

    with pytest.raises(DuplicateError, match="Ya existe"):
        with db_cursor(factory, duplicate_message="Ya existe") as (_, cur):
            cur.execute("INSERT INTO t VALUES(1)")

    assert factory.conn.calls == ["cursor", "rollback", "close"]
    assert factory.cursor.closed


def test_duplicate_key_without_message_propagates_unchanged():
    factory = FakeFactory(error=_duplicate())

    with pytest.raises(mysql.connector.IntegrityError) as info:
        with db_cursor(factory) as (_, cur):
            cur.execute("INSERT INTO t VALUES(1)")

    assert not isinstance(info.value, DuplicateError)
    assert "rollback" in factory.conn.calls


def test_other_integrity_errors_are_not_duplicates():
    fk_error = mysql.connector.IntegrityError(msg="FK fails", errno=errorcode.ER_NO_REFERENCED_ROW_2)
    factory = FakeFactory(error=fk_error)

    with pytest.raises(mysql.connector.IntegrityError):
        with db_cursor(factory, duplicate_message="Ya existe") as (_, cur):
            cur.execute("INSERT INTO t VALUES(1)")

    assert not is_duplicate_key(fk_error)
    assert is_duplicate_key(_duplicate())
    assert not is_duplicate_key(ValueError("x"))


def test_non_database_error_rolls_back():
    factory = FakeFactory()

    with pytest.raises(RuntimeError):
        with db_cursor(factory):
            raise RuntimeError("boom")

    assert factory.conn.calls == ["cursor", "rollback", "close"]
