from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.constants import DEFAULT_PLACEHOLDER_NIS_PREFIX
from .model import ResolveOptions
from .strategies.email_nis_strategy import DEFAULT_MIN_PATTERN_LENGTH


@dataclass(frozen=True)
class ResolverSettings:
    persist_links: bool = True
    allow_bootstrap: bool = False
    match_email_nis: bool = True
    email_nis_min_length: int = DEFAULT_MIN_PATTERN_LENGTH
    placeholder_nis_prefix: str = DEFAULT_PLACEHOLDER_NIS_PREFIX

    @classmethod
    def from_settings(cls, settings: Any) -> "ResolverSettings":
        """Read RESOLVER_* attributes from a config settings module."""
        return cls(
            persist_links=bool(getattr(settings, "RESOLVER_PERSIST_LINKS", True)),
            allow_bootstrap=bool(getattr(settings, "RESOLVER_ALLOW_BOOTSTRAP", False)),
            match_email_nis=bool(getattr(settings, "RESOLVER_MATCH_EMAIL_NIS", True)),
            email_nis_min_length=int(getattr(settings, "RESOLVER_EMAIL_NIS_MIN_LENGTH", DEFAULT_MIN_PATTERN_LENGTH)),
            placeholder_nis_prefix=str(getattr(settings, "PLACEHOLDER_NIS_PREFIX", DEFAULT_PLACEHOLDER_NIS_PREFIX)),
        )

    def default_options(self) -> ResolveOptions:
        return ResolveOptions(persist_links=self.persist_links, allow_bootstrap=self.allow_bootstrap)
