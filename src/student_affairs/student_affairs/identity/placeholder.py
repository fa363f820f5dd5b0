from __future__ import annotations

import threading
import time
import uuid
from typing import Callable, Optional

from ..core.constants import DEFAULT_PLACEHOLDER_NIS_PREFIX


class PlaceholderNisGenerator:
    """Generate NIS tokens for bootstrapped students, e.g. ``SIS1760862000123A1B2C3``.

    Millisecond timestamps are forced strictly increasing within the process and
    a random suffix separates concurrent processes. Real NIS values are numeric,
    so the letter prefix keeps placeholders recognisable.
    """

    def __init__(self, prefix: str = DEFAULT_PLACEHOLDER_NIS_PREFIX, *, clock: Optional[Callable[[], float]] = None):
        if not prefix or prefix.isdigit():
            raise ValueError("prefix must be non-empty and non-numeric")
        self._prefix = prefix
        self._clock = clock or time.time
        self._lock = threading.Lock()
        self._last_ms = 0

    @property
    def prefix(self) -> str:
        return self._prefix

    def next(self) -> str:
        with self._lock:
            ms = max(int(self._clock() * 1000), self._last_ms + 1)
            self._last_ms = ms
        return f"{self._prefix}{ms}{uuid.uuid4().hex[:6].upper()}"


def is_placeholder_nis(nis: Optional[str], prefix: str = DEFAULT_PLACEHOLDER_NIS_PREFIX) -> bool:
    return bool(nis) and nis.startswith(prefix) and not nis.isdigit()
