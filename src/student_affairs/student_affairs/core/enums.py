from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Peran pengguna untuk hak akses dashboard."""

    ADMIN = "admin"
    KEPALA_SEKOLAH = "kepala_sekolah"
    WAKA_KESISWAAN = "waka_kesiswaan"
    WALI_KELAS = "wali_kelas"
    GURU_BK = "guru_bk"
    TPPK = "tppk"
    ARPS = "arps"
    P4GN = "p4gn"
    KOORDINATOR_EKSTRAKURIKULER = "koordinator_ekstrakurikuler"
    PELATIH_EKSTRAKURIKULER = "pelatih_ekstrakurikuler"
    OSIS = "osis"
    ORANG_TUA = "orang_tua"
    SISWA = "siswa"

    @classmethod
    def least_privileged(cls) -> "Role":
        return cls.SISWA

    @classmethod
    def parse(cls, value: str | None) -> "Role":
        try:
            return cls(value)
        except ValueError:
            return cls.least_privileged()


class StudentStatus(str, Enum):
    """Status siswa yang disimpan di tabel students."""

    ACTIVE = "active"
    GRADUATED = "graduated"
    TRANSFERRED = "transferred"
    DROPPED = "dropped"


class Gender(str, Enum):
    MALE = "L"
    FEMALE = "P"


class MatchKind(str, Enum):
    """Tagged outcome of a single matching strategy attempt."""

    MATCHED = "matched"
    AMBIGUOUS = "ambiguous"
    CONFLICT = "conflict"
    NOT_APPLICABLE = "not_applicable"
    NO_MATCH = "no_match"


class ResolutionStatus(str, Enum):
    ALREADY_LINKED = "already_linked"
    MATCHED = "matched"
    LINKED = "linked"
    CREATED = "created"
    NOT_FOUND = "not_found"


class ReviewKind(str, Enum):
    """Kinds of resolver events that need an administrator's attention."""

    LINK_CONFLICT = "link_conflict"
    AMBIGUOUS_NAME = "ambiguous_name"
    AMBIGUOUS_NIS_PATTERN = "ambiguous_nis_pattern"
    SINGLE_ORPHAN = "single_orphan"
