from __future__ import annotations

import re
from datetime import date
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..common.log import get_logger
from .connection import DatabaseConnection, DBConfig
from .store import RecordStore

logger = get_logger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes and '--' comments).
    buf: list[str] = []
    in_single = False
    in_double = False
    in_comment = False
    escape = False
    prev = ""

    for ch in sql:
        if in_comment:
            if ch == "\n":
                in_comment = False
                buf.append(ch)
            prev = ch
            continue

        if escape:
            buf.append(ch)
            escape = False
            prev = ch
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            prev = ch
            continue

        if ch == "-" and prev == "-" and not in_single and not in_double:
            buf.pop()
            in_comment = True
            prev = ""
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            prev = ch
            if stmt:
                yield stmt
            continue

        buf.append(ch)
        prev = ch

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def ensure_database_exists(db_config: dict) -> None:
    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def _run_file(db_config: dict, path: str | Path) -> None:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_file(db_config, schema_path)
    logger.info("Applied schema %s", schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _run_file(db_config, seed_path)
    logger.info("Applied seed %s", seed_path)


DEMO_ACCOUNTS = (
    # (id, email, password, full_name, role)
    ("00000000-0000-0000-0000-000000000001", "admin@smk.sch.id", "admin123", "Admin Kesiswaan", "admin"),
    ("00000000-0000-0000-0000-000000000002", "budi@smk.sch.id", "siswa123", "Budi Santoso", "siswa"),
)


def ensure_demo_accounts(db_config: dict) -> None:
    """Upsert demo login accounts with freshly hashed passwords."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor(dictionary=True)
        for account_id, email, password, full_name, role in DEMO_ACCOUNTS:
            password_hash = generate_password_hash(password)
            cur.execute(
                """
                INSERT INTO accounts (id, email, password_hash, is_active)
                VALUES (%s, %s, %s, 1)
                ON DUPLICATE KEY UPDATE password_hash=VALUES(password_hash), is_active=1
                """,
                (account_id, email, password_hash),
            )
            cur.execute(
                """
                INSERT INTO profiles (id, full_name, role)
                VALUES (%s, %s, %s)
                ON DUPLICATE KEY UPDATE full_name=VALUES(full_name), role=VALUES(role)
                """,
                (account_id, full_name, role),
            )
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


DEMO_STUDENTS = (
    # (id, nis, nisn, full_name, gender)
    ("10000000-0000-0000-0000-000000000001", "1001", "0061234501", "Budi Santoso", "L"),
    ("10000000-0000-0000-0000-000000000002", "1002", "0061234502", "Siti Aminah", "P"),
    ("10000000-0000-0000-0000-000000000003", "1003", "0061234503", "Siti Rahma", "P"),
)


def seed_memory_store(store: RecordStore) -> None:
    """Load the same demo rows as seed.sql + ensure_demo_accounts into a record store."""
    for student_id, nis, nisn, full_name, gender in DEMO_STUDENTS:
        store.insert_if_absent(
            "students",
            {
                "id": student_id,
                "nis": nis,
                "nisn": nisn,
                "full_name": full_name,
                "gender": gender,
                "status": "active",
                "admission_date": date(2024, 7, 15),
                "user_id": None,
            },
        )
    for account_id, email, password, full_name, role in DEMO_ACCOUNTS:
        store.insert_if_absent(
            "accounts",
            {"id": account_id, "email": email, "password_hash": generate_password_hash(password), "is_active": True},
        )
        store.insert_if_absent(
            "profiles",
            {
                "id": account_id,
                "full_name": full_name,
                "nis": "1001" if role == "siswa" else None,
                "role": role,
                "student_id": None,
            },
        )
