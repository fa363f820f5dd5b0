from __future__ import annotations

import copy
import threading
import uuid
from typing import Dict, List, Optional, Sequence

from ..core.exceptions import StoreError
from .query import Filter, OrderBy, check_identifier, row_matches
from .store import Record, RecordStore


class InMemoryRecordStore(RecordStore):
    """Process-local store used by tests and ``STORE_BACKEND=memory``.

    A single lock makes every operation atomic, which is what gives the
    conditional ``update`` its compare-and-set behaviour.
    """

    def __init__(self, collections: Optional[Sequence[str]] = None, *, unique: Optional[Dict[str, Sequence[str]]] = None):
        self._lock = threading.Lock()
        self._data: Dict[str, Dict[str, Record]] = {}
        self._restricted = collections is not None
        for name in collections or ():
            self._data[check_identifier(name)] = {}
        self._unique = {k: tuple(v) for k, v in (unique or {}).items()}
        self.writes = 0

    def _table(self, collection: str) -> Dict[str, Record]:
        check_identifier(collection)
        if collection not in self._data:
            if self._restricted:
                raise StoreError(f"Koleksi tidak dikenal: {collection}")
            self._data[collection] = {}
        return self._data[collection]

    def _check_unique(self, collection: str, table: Dict[str, Record], row: Record, *, skip_id: Optional[str] = None) -> None:
        for field in self._unique.get(collection, ()):
            value = row.get(field)
            if value is None:
                continue
            for rid, other in table.items():
                if rid != skip_id and other.get(field) == value:
                    raise StoreError(f"Duplicate entry {value!r} for {collection}.{field}")

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        with self._lock:
            row = self._table(collection).get(str(record_id))
            return copy.deepcopy(row) if row is not None else None

    def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        with self._lock:
            rows = [copy.deepcopy(r) for r in self._table(collection).values() if row_matches(r, filters)]
        if order is not None:
            # None sorts first ascending, last descending (MySQL semantics).
            rows.sort(
                key=lambda r: (r.get(order.field) is not None, r.get(order.field) if r.get(order.field) is not None else ""),
                reverse=order.descending,
            )
        if limit is not None:
            rows = rows[: int(limit)]
        return rows

    def insert(self, collection: str, record: Record) -> Record:
        row = dict(record)
        row.setdefault("id", str(uuid.uuid4()))
        row["id"] = str(row["id"])
        with self._lock:
            table = self._table(collection)
            if row["id"] in table:
                raise StoreError(f"Duplicate entry {row['id']!r} for {collection}.id")
            self._check_unique(collection, table, row)
            table[row["id"]] = row
            self.writes += 1
            return copy.deepcopy(row)

    def insert_if_absent(self, collection: str, record: Record) -> bool:
        row = dict(record)
        if not row.get("id"):
            raise StoreError("insert_if_absent membutuhkan id")
        row["id"] = str(row["id"])
        with self._lock:
            table = self._table(collection)
            if row["id"] in table:
                return False
            self._check_unique(collection, table, row)
            table[row["id"]] = row
            self.writes += 1
            return True

    def update(
        self,
        collection: str,
        record_id: str,
        patch: Record,
        condition: Sequence[Filter] = (),
    ) -> bool:
        with self._lock:
            table = self._table(collection)
            current = table.get(str(record_id))
            if current is None or not row_matches(current, condition):
                return False
            updated = {**current, **patch, "id": current["id"]}
            self._check_unique(collection, table, updated, skip_id=current["id"])
            table[current["id"]] = updated
            self.writes += 1
            return True
