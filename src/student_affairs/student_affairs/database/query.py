"""Backend-neutral filter vocabulary for the record store.

Each filter knows how to render itself as a MySQL predicate and how to test
a plain dict row, so the in-memory and MySQL stores stay in agreement.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple, Union

from ..core.exceptions import ValidationError

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")


def check_identifier(name: str) -> str:
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise ValidationError(f"Nama kolom/tabel tidak valid: {name!r}")
    return name


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _like_to_regex(pattern: str) -> re.Pattern:
    out: list[str] = []
    escape = False
    for ch in pattern:
        if escape:
            out.append(re.escape(ch))
            escape = False
        elif ch == "\\":
            escape = True
        elif ch == "%":
            out.append(".*")
        elif ch == "_":
            out.append(".")
        else:
            out.append(re.escape(ch))
    return re.compile("^" + "".join(out) + "$", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class Eq:
    field: str
    value: Any

    def __post_init__(self):
        check_identifier(self.field)

    def to_sql(self) -> Tuple[str, tuple]:
        if self.value is None:
            return f"`{self.field}` IS NULL", ()
        return f"`{self.field}` = %s", (_sql_value(self.value),)

    def matches(self, row: Mapping[str, Any]) -> bool:
        return _plain(row.get(self.field)) == _plain(self.value)


@dataclass(frozen=True)
class IsNull:
    field: str

    def __post_init__(self):
        check_identifier(self.field)

    def to_sql(self) -> Tuple[str, tuple]:
        return f"`{self.field}` IS NULL", ()

    def matches(self, row: Mapping[str, Any]) -> bool:
        return row.get(self.field) is None


@dataclass(frozen=True)
class ILike:
    """Case-insensitive LIKE; ``%`` and ``_`` are wildcards, backslash escapes."""

    field: str
    pattern: str

    def __post_init__(self):
        check_identifier(self.field)

    @classmethod
    def contains(cls, field: str, value: str) -> "ILike":
        return cls(field, f"%{escape_like(value)}%")

    def to_sql(self) -> Tuple[str, tuple]:
        return f"LOWER(`{self.field}`) LIKE LOWER(%s)", (self.pattern,)

    def matches(self, row: Mapping[str, Any]) -> bool:
        value = row.get(self.field)
        if value is None:
            return False
        return bool(_like_to_regex(self.pattern).match(str(value)))


@dataclass(frozen=True)
class OrderBy:
    field: str
    descending: bool = False

    def __post_init__(self):
        check_identifier(self.field)

    def to_sql(self) -> str:
        return f"`{self.field}` {'DESC' if self.descending else 'ASC'}"


Filter = Union[Eq, IsNull, ILike]


def where_clause(filters: Sequence[Filter]) -> Tuple[str, tuple]:
    if not filters:
        return "", ()
    parts: list[str] = []
    params: list[Any] = []
    for f in filters:
        sql, p = f.to_sql()
        parts.append(sql)
        params.extend(p)
    return " AND ".join(parts), tuple(params)


def row_matches(row: Mapping[str, Any], filters: Sequence[Filter]) -> bool:
    return all(f.matches(row) for f in filters)


def _plain(value: Any) -> Any:
    # Enums are stored by value.
    return getattr(value, "value", value)


def _sql_value(value: Any) -> Any:
    return _plain(value)
