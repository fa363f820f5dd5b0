from __future__ import annotations

import uuid
from typing import Any, List, Optional, Sequence

from ..core.exceptions import StoreError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone
from .query import Filter, OrderBy, check_identifier, where_clause
from .store import Record, RecordStore

KNOWN_COLLECTIONS = frozenset({"accounts", "profiles", "students", "identity_reviews"})


def _value(value: Any) -> Any:
    return getattr(value, "value", value)


class MySQLRecordStore(RecordStore):
    def __init__(self, conn_factory: DatabaseConnection, *, collections: Sequence[str] = tuple(KNOWN_COLLECTIONS)):
        self._conn_factory = conn_factory
        self._collections = frozenset(check_identifier(c) for c in collections)

    def _table(self, collection: str) -> str:
        if collection not in self._collections:
            raise StoreError(f"Koleksi tidak dikenal: {collection}")
        return collection

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        table = self._table(collection)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT * FROM `{table}` WHERE `id`=%s", (str(record_id),))
            return fetchone(cur)

    def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        table = self._table(collection)
        where, params = where_clause(filters)
        sql = f"SELECT * FROM `{table}`"
        if where:
            sql += f" WHERE {where}"
        if order is not None:
            sql += f" ORDER BY {order.to_sql()}"
        if limit is not None:
            sql += " LIMIT %s"
            params = params + (int(limit),)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return fetchall(cur)

    def insert(self, collection: str, record: Record) -> Record:
        table = self._table(collection)
        row = dict(record)
        row["id"] = str(row.get("id") or uuid.uuid4())
        columns = [check_identifier(c) for c in row]
        placeholders = ",".join(["%s"] * len(columns))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO `{table}` ({','.join(f'`{c}`' for c in columns)}) VALUES ({placeholders})",
                tuple(_value(row[c]) for c in columns),
            )
        return row

    def insert_if_absent(self, collection: str, record: Record) -> bool:
        table = self._table(collection)
        row = dict(record)
        if not row.get("id"):
            raise StoreError("insert_if_absent membutuhkan id")
        columns = [check_identifier(c) for c in row]
        placeholders = ",".join(["%s"] * len(columns))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO `{table}` ({','.join(f'`{c}`' for c in columns)}) VALUES ({placeholders}) "
                f"ON DUPLICATE KEY UPDATE `id`=`id`",
                tuple(_value(row[c]) for c in columns),
            )
            # rowcount is 1 for a fresh insert, 0 when the key already existed.
            return cur.rowcount == 1

    def update(
        self,
        collection: str,
        record_id: str,
        patch: Record,
        condition: Sequence[Filter] = (),
    ) -> bool:
        table = self._table(collection)
        if not patch:
            return False
        columns = [check_identifier(c) for c in patch if c != "id"]
        set_sql = ", ".join(f"`{c}`=%s" for c in columns)
        params: tuple = tuple(_value(patch[c]) for c in columns) + (str(record_id),)
        where, cond_params = where_clause(condition)
        sql = f"UPDATE `{table}` SET {set_sql} WHERE `id`=%s"
        if where:
            sql += f" AND {where}"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params + cond_params)
            return cur.rowcount > 0
