from __future__ import annotations

from src.student_affairs.student_affairs.accounts.model import Account
from src.student_affairs.student_affairs.core.enums import Role
from src.student_affairs.student_affairs.profiles.model import Profile
from src.student_affairs.student_affairs.profiles.service import ProfileBootstrapService


class RacingProfiles:
    """Another request creates the profile between our read and our insert."""

    def __init__(self, winner: Profile):
        self._winner = winner
        self._reads = 0

    def get_by_id(self, profile_id):
        self._reads += 1
        return None if self._reads == 1 else self._winner

    def insert_if_absent(self, profile):
        return False

    def set_student_id(self, *, profile_id, student_id):
        return True


def test_existing_profile_is_returned_untouched(seed, profiles_repo, store):
    seed.profile("u1", full_name="Budi Santoso", nis="1001", role=Role.WALI_KELAS)
    writes = store.writes

    profile = ProfileBootstrapService(profiles_repo).get_or_create(Account(id="u1", email="x@y.z"))

    assert profile.role == Role.WALI_KELAS
    assert profile.nis == "1001"
    assert store.writes == writes


def test_missing_profile_uses_email_local_part(profiles_repo, store):
    profile = ProfileBootstrapService(profiles_repo).get_or_create(Account(id="u2", email="siti.aminah@smk.sch.id"))

    assert profile.full_name == "siti.aminah"
    assert profile.role == Role.SISWA
    assert store.get("profiles", "u2")["role"] == "siswa"


def test_explicit_name_wins_over_email(profiles_repo):
    profile = ProfileBootstrapService(profiles_repo).get_or_create(
        Account(id="u2", email="s@smk.sch.id"), full_name=" Siti Aminah "
    )
    assert profile.full_name == "Siti Aminah"


def test_no_email_gets_generic_name(profiles_repo):
    profile = ProfileBootstrapService(profiles_repo).get_or_create(Account(id="u3"))
    assert profile.full_name == "Pengguna Baru"


def test_transient_profile_is_not_stored(profiles_repo, store):
    profile = ProfileBootstrapService(profiles_repo).get_or_create(Account(id="u4", email="a@b.c"), persist=False)

    assert profile.id == "u4"
    assert store.get("profiles", "u4") is None


def test_concurrent_creator_row_is_returned():
    winner = Profile(id="u5", full_name="Dibuat Duluan", role=Role.OSIS)

    profile = ProfileBootstrapService(RacingProfiles(winner)).get_or_create(Account(id="u5", email="u5@smk.sch.id"))

    assert profile is winner
