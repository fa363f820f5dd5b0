"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from datetime import date

import pytest

from src.student_affairs.student_affairs.core.enums import Role
from src.student_affairs.student_affairs.database.memory_store import InMemoryRecordStore
from src.student_affairs.student_affairs.identity.factory import MatchStrategyFactory
from src.student_affairs.student_affairs.identity.linker import LinkingWriter
from src.student_affairs.student_affairs.identity.model import ResolveOptions
from src.student_affairs.student_affairs.identity.placeholder import PlaceholderNisGenerator
from src.student_affairs.student_affairs.identity.service import IdentityResolver
from src.student_affairs.student_affairs.identity.settings import ResolverSettings
from src.student_affairs.student_affairs.profiles.service import ProfileBootstrapService
from src.student_affairs.student_affairs.profiles.store_profile_repository import StoreProfileRepository
from src.student_affairs.student_affairs.review.store_review_repository import StoreReviewLogRepository
from src.student_affairs.student_affairs.students.store_student_repository import StoreStudentRepository

COLLECTIONS = ["accounts", "identity_reviews", "profiles", "students"]


class Seeder:
    """Writes rows straight into the store, bypassing the resolver."""

    def __init__(self, store: InMemoryRecordStore):
        self.store = store

    def student(self, student_id: str, nis: str, full_name: str = "", *, user_id=None, status: str = "active", gender: str = "L"):
        self.store.insert(
            "students",
            {
                "id": student_id,
                "nis": nis,
                "full_name": full_name or f"Siswa {nis}",
                "user_id": user_id,
                "status": status,
                "gender": gender,
                "admission_date": date(2024, 7, 15),
            },
        )

    def profile(self, profile_id: str, *, full_name=None, nis=None, role: Role = Role.SISWA):
        self.store.insert(
            "profiles",
            {"id": profile_id, "full_name": full_name, "nis": nis, "role": role.value, "student_id": None},
        )

    def linked_to(self, student_id: str):
        return self.store.get("students", student_id)["user_id"]


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore(COLLECTIONS, unique={"students": ("nis", "user_id")})


@pytest.fixture
def seed(store) -> Seeder:
    return Seeder(store)


@pytest.fixture
def students_repo(store) -> StoreStudentRepository:
    return StoreStudentRepository(store)


@pytest.fixture
def profiles_repo(store) -> StoreProfileRepository:
    return StoreProfileRepository(store)


@pytest.fixture
def reviews_repo(store) -> StoreReviewLogRepository:
    return StoreReviewLogRepository(store)


def make_resolver(students_repo, profiles_repo, reviews_repo=None, *, settings: ResolverSettings = None, options: ResolveOptions = None):
    settings = settings or ResolverSettings()
    return IdentityResolver(
        students_repo,
        ProfileBootstrapService(profiles_repo),
        LinkingWriter(students_repo, profiles_repo),
        MatchStrategyFactory(settings).build(students_repo),
        reviews=reviews_repo,
        nis_generator=PlaceholderNisGenerator(settings.placeholder_nis_prefix),
        default_options=options or ResolveOptions(),
    )


@pytest.fixture
def resolver(students_repo, profiles_repo, reviews_repo) -> IdentityResolver:
    return make_resolver(students_repo, profiles_repo, reviews_repo)


@pytest.fixture
def resolver_factory(students_repo, profiles_repo, reviews_repo):
    def _build(*, settings: ResolverSettings = None, options: ResolveOptions = None, students=None):
        return make_resolver(students or students_repo, profiles_repo, reviews_repo, settings=settings, options=options)

    return _build
