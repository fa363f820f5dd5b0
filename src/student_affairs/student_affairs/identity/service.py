"""Identity resolution: attach an authenticated account to its student record.

Strategies are tried in a fixed order and the first match wins. Once a link
exists the direct-link strategy answers with a single read, which is what
makes repeated calls idempotent and write-free.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..accounts.model import Account
from ..common.datetime_utils import now_local, today_local
from ..common.log import get_logger
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_NEW_STUDENT_NAME
from ..core.enums import Gender, MatchKind, ResolutionStatus, Role, StudentStatus
from ..core.exceptions import StoreError
from ..profiles.service import ProfileBootstrapService
from ..review.model import ReviewEntry
from ..review.repository import ReviewLogRepository
from ..students.model import StudentRecord
from ..students.repository import StudentRepository
from .context import ResolveContext
from .linker import LinkingWriter
from .model import NOT_FOUND, MatchOutcome, Resolution, ResolveOptions
from .placeholder import PlaceholderNisGenerator
from .strategies.base import MatchStrategy

logger = get_logger(__name__)


class IdentityResolver:
    def __init__(
        self,
        students: StudentRepository,
        profiles: ProfileBootstrapService,
        linker: LinkingWriter,
        strategies: Sequence[MatchStrategy],
        *,
        reviews: Optional[ReviewLogRepository] = None,
        nis_generator: Optional[PlaceholderNisGenerator] = None,
        default_options: Optional[ResolveOptions] = None,
    ):
        if not strategies:
            raise ValueError("at least one match strategy is required")
        self._students = students
        self._profiles = profiles
        self._linker = linker
        self._strategies: List[MatchStrategy] = list(strategies)
        self._reviews = reviews
        self._nis_generator = nis_generator or PlaceholderNisGenerator()
        self._default_options = default_options or ResolveOptions()

    @property
    def strategies(self) -> List[MatchStrategy]:
        return list(self._strategies)

    @property
    def default_options(self) -> ResolveOptions:
        return self._default_options

    def resolve(self, account: Account, options: Optional[ResolveOptions] = None) -> Resolution:
        """Return the student record for ``account``, linking it if needed.

        Returns ``NOT_FOUND`` when no strategy matched and bootstrap is not
        allowed. ``StoreError`` from the repositories propagates unchanged.
        """
        require_non_empty(account.id, "ID akun")
        options = options or self._default_options
        ctx = ResolveContext(
            account,
            options,
            lambda: self._profiles.get_or_create(account, persist=options.persist_links),
        )

        for strategy in self._strategies:
            outcome = strategy.attempt(ctx)
            logger.debug("account=%s strategy=%s outcome=%s", account.id, strategy.name, outcome.kind.value)

            if outcome.kind == MatchKind.MATCHED:
                resolution = self._accept(ctx, strategy, outcome)
                if resolution is not None:
                    return resolution
                continue

            if outcome.review is not None:
                self._report(ctx, strategy, outcome)

        if self._may_bootstrap(ctx):
            return self._bootstrap(ctx)

        logger.info("No student record for account %s", account.id)
        return NOT_FOUND

    def _accept(self, ctx: ResolveContext, strategy: MatchStrategy, outcome: MatchOutcome) -> Optional[Resolution]:
        student = outcome.student
        account_id = ctx.account.id

        if student.linked_account_id == account_id:
            return Resolution(ResolutionStatus.ALREADY_LINKED, student, strategy.name)

        if not ctx.options.persist_links:
            return Resolution(ResolutionStatus.MATCHED, student, strategy.name)

        try:
            linked = self._linker.link(student, account_id)
        except StoreError as exc:
            # Unique user_id: the account already owns another record.
            return self._existing_link(account_id, strategy.name, exc)
        if linked:
            return Resolution(ResolutionStatus.LINKED, LinkingWriter.linked_copy(student, account_id), strategy.name)

        fresh = self._students.get_by_id(student.id)
        if fresh is not None and fresh.linked_account_id == account_id:
            logger.info("Student %s was linked to account %s by a concurrent request", student.id, account_id)
            return Resolution(ResolutionStatus.ALREADY_LINKED, fresh, strategy.name)

        # Conditional write lost: another account linked the record first.
        self._report(
            ctx,
            strategy,
            MatchOutcome.conflict(student, f"kalah balapan menautkan siswa {student.nis}"),
        )
        return None

    def _existing_link(self, account_id: str, strategy_name: str, error: StoreError) -> Resolution:
        existing = self._students.find_by_linked_account(account_id)
        if existing is None:
            raise error
        logger.info("Account %s already owns student %s", account_id, existing.id)
        return Resolution(ResolutionStatus.ALREADY_LINKED, existing, strategy_name)

    def _report(self, ctx: ResolveContext, strategy: MatchStrategy, outcome: MatchOutcome) -> None:
        student_ids = tuple(s.id for s in outcome.candidates)
        logger.warning(
            "Needs review (%s via %s): account=%s students=%s %s",
            outcome.review.value,
            strategy.name,
            ctx.account.id,
            ",".join(student_ids) or "-",
            outcome.detail or "",
        )
        if self._reviews is None or not ctx.options.persist_links:
            return
        self._reviews.record(
            ReviewEntry(
                kind=outcome.review,
                account_id=ctx.account.id,
                student_ids=student_ids,
                detail=outcome.detail,
                created_at=now_local().replace(microsecond=0),
            )
        )

    def _may_bootstrap(self, ctx: ResolveContext) -> bool:
        if not (ctx.options.allow_bootstrap and ctx.options.persist_links):
            return False
        return ctx.profile.role == Role.SISWA

    def _bootstrap(self, ctx: ResolveContext) -> Resolution:
        account = ctx.account
        full_name = ctx.profile.full_name or account.email_local_part or DEFAULT_NEW_STUDENT_NAME
        try:
            student: StudentRecord = self._students.create(
                nis=self._nis_generator.next(),
                full_name=full_name,
                linked_account_id=account.id,
                gender=Gender.MALE,
                status=StudentStatus.ACTIVE,
                admission_date=today_local(),
            )
        except StoreError as exc:
            return self._existing_link(account.id, "bootstrap", exc)
        self._linker.mirror_on_profile(account.id, student.id)
        logger.info("Bootstrapped student %s (NIS %s) for account %s", student.id, student.nis, account.id)
        return Resolution(ResolutionStatus.CREATED, student, "bootstrap")
