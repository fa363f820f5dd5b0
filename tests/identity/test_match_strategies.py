from __future__ import annotations

from src.student_affairs.student_affairs.accounts.model import Account
from src.student_affairs.student_affairs.core.enums import MatchKind, ReviewKind, Role
from src.student_affairs.student_affairs.identity.context import ResolveContext
from src.student_affairs.student_affairs.identity.model import ResolveOptions
from src.student_affairs.student_affairs.identity.strategies.direct_link_strategy import DirectLinkStrategy
from src.student_affairs.student_affairs.identity.strategies.email_nis_strategy import EmailNisPatternStrategy
from src.student_affairs.student_affairs.identity.strategies.name_similarity_strategy import NameSimilarityStrategy
from src.student_affairs.student_affairs.identity.strategies.profile_nis_strategy import ProfileNisStrategy
from src.student_affairs.student_affairs.identity.strategies.single_orphan_strategy import SingleOrphanStrategy
from src.student_affairs.student_affairs.profiles.model import Profile


def ctx_for(account_id="u1", email=None, *, full_name=None, nis=None):
    profile = Profile(id=account_id, full_name=full_name, role=Role.SISWA, nis=nis)
    return ResolveContext(Account(id=account_id, email=email), ResolveOptions(), lambda: profile)


class TestDirectLink:
    def test_found(self, seed, students_repo):
        seed.student("s1", "1001", "Budi", user_id="u1")
        outcome = DirectLinkStrategy(students_repo).attempt(ctx_for())
        assert outcome.kind == MatchKind.MATCHED
        assert outcome.student.id == "s1"

    def test_does_not_load_profile(self, seed, students_repo):
        calls = []
        ctx = ResolveContext(Account(id="u1"), ResolveOptions(), lambda: calls.append(1))
        DirectLinkStrategy(students_repo).attempt(ctx)
        assert calls == []
        assert not ctx.profile_loaded

    def test_missing(self, students_repo):
        assert DirectLinkStrategy(students_repo).attempt(ctx_for()).kind == MatchKind.NO_MATCH


class TestProfileNis:
    def test_without_nis_is_not_applicable(self, students_repo):
        assert ProfileNisStrategy(students_repo).attempt(ctx_for()).kind == MatchKind.NOT_APPLICABLE

    def test_unlinked_record_matches(self, seed, students_repo):
        seed.student("s1", "1001", "Budi")
        outcome = ProfileNisStrategy(students_repo).attempt(ctx_for(nis="1001"))
        assert outcome.kind == MatchKind.MATCHED
        assert outcome.student.id == "s1"

    def test_record_of_other_account_is_conflict(self, seed, students_repo):
        seed.student("s1", "1001", "Budi", user_id="u9")
        outcome = ProfileNisStrategy(students_repo).attempt(ctx_for(nis="1001"))
        assert outcome.kind == MatchKind.CONFLICT
        assert outcome.review == ReviewKind.LINK_CONFLICT
        assert "u9" in outcome.detail

    def test_unknown_nis(self, seed, students_repo):
        seed.student("s1", "1001", "Budi")
        assert ProfileNisStrategy(students_repo).attempt(ctx_for(nis="9999")).kind == MatchKind.NO_MATCH


class TestEmailNisPattern:
    def test_short_local_part_is_not_applicable(self, seed, students_repo):
        seed.student("s1", "1001", "Budi")
        outcome = EmailNisPatternStrategy(students_repo).attempt(ctx_for(email="10@smk.sch.id"))
        assert outcome.kind == MatchKind.NOT_APPLICABLE

    def test_several_hits_are_ambiguous(self, seed, students_repo):
        seed.student("s1", "21001", "Budi")
        seed.student("s2", "31001", "Andi")
        outcome = EmailNisPatternStrategy(students_repo).attempt(ctx_for(email="1001@smk.sch.id"))
        assert outcome.kind == MatchKind.AMBIGUOUS
        assert outcome.review == ReviewKind.AMBIGUOUS_NIS_PATTERN
        assert {s.id for s in outcome.candidates} == {"s1", "s2"}

    def test_linked_records_are_ignored(self, seed, students_repo):
        seed.student("s1", "1001", "Budi", user_id="u9")
        outcome = EmailNisPatternStrategy(students_repo).attempt(ctx_for(email="1001@smk.sch.id"))
        assert outcome.kind == MatchKind.NO_MATCH

    def test_local_part_must_be_contained_in_nis(self, seed, students_repo):
        seed.student("s1", "1001", "Budi")
        outcome = EmailNisPatternStrategy(students_repo).attempt(ctx_for(email="siswa.1001@smk.sch.id"))
        assert outcome.kind == MatchKind.NO_MATCH


class TestNameSimilarity:
    def test_case_insensitive_substring(self, seed, students_repo):
        seed.student("s1", "1001", "BUDI SANTOSO")
        outcome = NameSimilarityStrategy(students_repo).attempt(ctx_for(full_name="budi san"))
        assert outcome.kind == MatchKind.MATCHED
        assert outcome.student.id == "s1"

    def test_wildcards_in_name_are_literal(self, seed, students_repo):
        seed.student("s1", "1001", "Budi Santoso")
        outcome = NameSimilarityStrategy(students_repo).attempt(ctx_for(full_name="B%i"))
        assert outcome.kind == MatchKind.NO_MATCH

    def test_linked_records_do_not_count_towards_ambiguity(self, seed, students_repo):
        seed.student("s1", "1001", "Siti Aminah", user_id="u9")
        seed.student("s2", "1002", "Siti Rahma")
        outcome = NameSimilarityStrategy(students_repo).attempt(ctx_for(full_name="Siti"))
        assert outcome.kind == MatchKind.MATCHED
        assert outcome.student.id == "s2"

    def test_two_hits_are_ambiguous(self, seed, students_repo):
        seed.student("s1", "1001", "Siti Aminah")
        seed.student("s2", "1002", "Siti Rahma")
        outcome = NameSimilarityStrategy(students_repo).attempt(ctx_for(full_name="siti"))
        assert outcome.kind == MatchKind.AMBIGUOUS
        assert outcome.review == ReviewKind.AMBIGUOUS_NAME

    def test_blank_name_is_not_applicable(self, students_repo):
        assert NameSimilarityStrategy(students_repo).attempt(ctx_for(full_name="   ")).kind == MatchKind.NOT_APPLICABLE


class TestSingleOrphan:
    def test_one_orphan_is_reported_but_never_matched(self, seed, students_repo):
        seed.student("s1", "1001", "Budi")
        seed.student("s2", "1002", "Andi", user_id="u9")
        outcome = SingleOrphanStrategy(students_repo).attempt(ctx_for())
        assert outcome.kind == MatchKind.NO_MATCH
        assert outcome.review == ReviewKind.SINGLE_ORPHAN
        assert [s.id for s in outcome.candidates] == ["s1"]

    def test_two_orphans_are_silent(self, seed, students_repo):
        seed.student("s1", "1001", "Budi")
        seed.student("s2", "1002", "Andi")
        outcome = SingleOrphanStrategy(students_repo).attempt(ctx_for())
        assert outcome.kind == MatchKind.NO_MATCH
        assert outcome.review is None
