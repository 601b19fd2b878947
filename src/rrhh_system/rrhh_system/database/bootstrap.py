from __future__ import annotations

import json
import logging
import re
from dataclasses import asdict
from pathlib import Path
from typing import Iterator, Optional

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)


# Fixed master data loaded into lookup tables when they are empty.
MASTER_ROWS: dict[str, list[dict]] = {
    "rrhh_marital_status": [
        {"name": "Soltero/a"},
        {"name": "Casado/a"},
        {"name": "Divorciado/a"},
        {"name": "Viudo/a"},
        {"name": "Conviviente Civil"},
    ],
    "rrhh_contract_types": [
        {"name": "Indefinido"},
        {"name": "Plazo Fijo"},
        {"name": "Por Obra o Faena"},
        {"name": "Part-Time"},
    ],
    "rrhh_pension_providers": [
        {"name": "Capital"},
        {"name": "Cuprum"},
        {"name": "Habitat"},
        {"name": "Modelo"},
        {"name": "PlanVital"},
        {"name": "Provida"},
        {"name": "Uno"},
    ],
    "rrhh_health_providers": [
        {"name": "Fonasa"},
        {"name": "Banmédica"},
        {"name": "Colmena"},
        {"name": "Consalud"},
        {"name": "Cruz Blanca"},
        {"name": "Esencial"},
        {"name": "Nueva Masvida"},
        {"name": "Vida Tres"},
    ],
    "rrhh_departamentos": [
        {"name": "ADMINISTRACIÓN"},
        {"name": "OPERACIONES"},
        {"name": "FINANZAS"},
        {"name": "RECURSOS HUMANOS"},
        {"name": "COMERCIAL"},
    ],
    "rrhh_cargos": [
        {"name": "GERENTE GENERAL"},
        {"name": "JEFE DE OPERACIONES"},
        {"name": "ANALISTA RRHH"},
        {"name": "ADMINISTRATIVO"},
        {"name": "CONDUCTOR"},
        {"name": "AUXILIAR"},
    ],
    "rrhh_turnos": [
        {
            "name": "Turno A (Mañana)",
            "start_time": "08:00:00",
            "end_time": "16:00:00",
            "break_minutes": 60,
            "tolerance_minutes": 15,
            "work_days": json.dumps([1, 2, 3, 4, 5]),
        },
        {
            "name": "Turno B (Tarde)",
            "start_time": "16:00:00",
            "end_time": "00:00:00",
            "break_minutes": 60,
            "tolerance_minutes": 15,
            "work_days": json.dumps([1, 2, 3, 4, 5]),
        },
    ],
    "rrhh_absence_types": [
        {"name": "Vacaciones", "color": "blue"},
        {"name": "Licencia Médica", "color": "red"},
        {"name": "Permiso Administrativo", "color": "orange"},
        {"name": "Permiso sin Goce", "color": "slate"},
    ],
}


def _as_target(db_config: dict) -> DBConfig:
    return DBConfig.from_dict(db_config)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = asdict(target)
    if not with_database:
        kwargs.pop("database")
    return mysql.connector.connect(use_pure=True, **kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a DDL script on ';' outside quoted literals; drops '--' comment lines."""

    sql = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))
    start = 0
    quote: Optional[str] = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def seed_master_tables(db_config: dict, masters: dict[str, list[dict]] | None = None) -> dict[str, int]:
    """Insert master rows into each lookup table that is still empty.

    Returns {table: inserted_rows}. Tables that fail (missing, bad columns)
    are logged and skipped so one broken table does not stop the rest.
    """

    masters = MASTER_ROWS if masters is None else masters
    inserted: dict[str, int] = {}

    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        for table, rows in masters.items():
            try:
                cur.execute(f"SELECT COUNT(*) FROM `{table}`")
                (count,) = cur.fetchone()
            except mysql.connector.Error as e:
                logger.error("Error checking %s: %s", table, e)
                continue

            if count:
                logger.info("%s already has data (%s rows), skipping", table, count)
                inserted[table] = 0
                continue

            columns = list(rows[0].keys())
            placeholders = ",".join(["%s"] * len(columns))
            col_sql = ",".join(f"`{c}`" for c in columns)
            try:
                cur.executemany(
                    f"INSERT INTO `{table}` ({col_sql}) VALUES ({placeholders})",
                    [tuple(r[c] for c in columns) for r in rows],
                )
                conn.commit()
            except mysql.connector.Error as e:
                conn.rollback()
                logger.error("Error inserting into %s: %s", table, e)
                continue

            logger.info("%s seeded with %s rows", table, len(rows))
            inserted[table] = len(rows)
    finally:
        conn.close()

    return inserted


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
