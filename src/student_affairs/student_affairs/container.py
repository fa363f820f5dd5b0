from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .accounts.service import AuthService
from .accounts.store_account_repository import StoreAccountRepository
from .core.exceptions import ValidationError
from .database.connection import DatabaseConnection, DBConfig
from .database.memory_store import InMemoryRecordStore
from .database.mysql_store import KNOWN_COLLECTIONS, MySQLRecordStore
from .database.store import RecordStore
from .identity.factory import MatchStrategyFactory
from .identity.linker import LinkingWriter
from .identity.placeholder import PlaceholderNisGenerator
from .identity.service import IdentityResolver
from .identity.settings import ResolverSettings
from .profiles.service import ProfileBootstrapService
from .profiles.store_profile_repository import StoreProfileRepository
from .review.store_review_repository import StoreReviewLogRepository
from .students.store_student_repository import StoreStudentRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore

    accounts_repo: StoreAccountRepository
    students_repo: StoreStudentRepository
    profiles_repo: StoreProfileRepository
    reviews_repo: StoreReviewLogRepository

    auth_service: AuthService
    profile_service: ProfileBootstrapService
    identity_resolver: IdentityResolver
    resolver_settings: ResolverSettings


def build_store(settings: Any) -> RecordStore:
    backend = str(getattr(settings, "STORE_BACKEND", "mysql")).lower()
    if backend == "memory":
        return InMemoryRecordStore(sorted(KNOWN_COLLECTIONS), unique={"students": ("nis", "user_id"), "accounts": ("email",)})
    if backend == "mysql":
        return MySQLRecordStore(DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG"))))
    raise ValidationError(f"STORE_BACKEND tidak dikenal: {backend}")


def build_container(*, settings: Any, store: Optional[RecordStore] = None) -> Container:
    store = store or build_store(settings)
    resolver_settings = ResolverSettings.from_settings(settings)

    accounts_repo = StoreAccountRepository(store)
    students_repo = StoreStudentRepository(store)
    profiles_repo = StoreProfileRepository(store)
    reviews_repo = StoreReviewLogRepository(store)

    auth_service = AuthService(accounts_repo)
    profile_service = ProfileBootstrapService(profiles_repo)
    identity_resolver = IdentityResolver(
        students_repo,
        profile_service,
        LinkingWriter(students_repo, profiles_repo),
        MatchStrategyFactory(resolver_settings).build(students_repo),
        reviews=reviews_repo,
        nis_generator=PlaceholderNisGenerator(resolver_settings.placeholder_nis_prefix),
        default_options=resolver_settings.default_options(),
    )

    return Container(
        store=store,
        accounts_repo=accounts_repo,
        students_repo=students_repo,
        profiles_repo=profiles_repo,
        reviews_repo=reviews_repo,
        auth_service=auth_service,
        profile_service=profile_service,
        identity_resolver=identity_resolver,
        resolver_settings=resolver_settings,
    )
