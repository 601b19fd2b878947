from __future__ import annotations

import json
from contextlib import contextmanager
from datetime import datetime, time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DuplicateError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(
    conn_factory: DatabaseConnection,
    *,
    dictionary: bool = True,
    duplicate_message: Optional[str] = None,
):
    """Yield (conn, cur) for one unit of work: commit on success, rollback on error.

    With ``duplicate_message`` set, a UNIQUE/PRIMARY KEY violation raised inside
    the block surfaces as ``DuplicateError(duplicate_message)``.
    """

    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except mysql.connector.Error as e:
        conn.rollback()
        if duplicate_message and is_duplicate_key(e):
            raise DuplicateError(duplicate_message) from e
        raise
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def is_duplicate_key(exc: BaseException) -> bool:
    return isinstance(exc, mysql.connector.Error) and exc.errno == errorcode.ER_DUP_ENTRY


def to_time(value: Any) -> Optional[time]:
    """TIME columns arrive as time, timedelta (C extension) or 'HH:MM[:SS]'."""

    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return (datetime.min + timedelta(seconds=seconds)).time()
    if isinstance(value, str):
        for fmt in ("%H:%M:%S", "%H:%M"):
            try:
                return datetime.strptime(value.strip(), fmt).time()
            except ValueError:
                continue
        raise ValueError(f"Invalid time string: {value!r}")
    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")


def load_json_list(value: Any) -> list:
    """JSON array column; the connector may hand back str, bytes or a list."""
    if value is None:
        return []
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return list(json.loads(value) or [])
    return list(value)
