from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Per-account metadata; ``id`` equals the account id."""

    id: str
    full_name: Optional[str]
    role: Role
    nis: Optional[str] = None
    student_id: Optional[str] = None
