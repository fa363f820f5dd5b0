from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Sequence

from .query import Filter, OrderBy

Record = Dict[str, Any]


class RecordStore(Protocol):
    """Generic persistence port: named collections of dict rows keyed by ``id``.

    Note (DIP): repositories depend on this interface, never on a concrete backend.
    Every backend failure surfaces as ``StoreError``.
    """

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        raise NotImplementedError

    def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        raise NotImplementedError

    def insert(self, collection: str, record: Record) -> Record:
        """Insert and return the stored row; an ``id`` is generated when missing."""
        raise NotImplementedError

    def insert_if_absent(self, collection: str, record: Record) -> bool:
        """Insert keyed on ``record['id']``; False when that id already exists."""
        raise NotImplementedError

    def update(
        self,
        collection: str,
        record_id: str,
        patch: Record,
        condition: Sequence[Filter] = (),
    ) -> bool:
        """Apply ``patch`` only if every ``condition`` holds on the current row."""
        raise NotImplementedError
