from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} tidak valid")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Collapse blank strings to None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None
