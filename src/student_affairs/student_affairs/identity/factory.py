from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..students.repository import StudentRepository
from .settings import ResolverSettings
from .strategies.base import MatchStrategy
from .strategies.direct_link_strategy import DirectLinkStrategy
from .strategies.email_nis_strategy import EmailNisPatternStrategy
from .strategies.name_similarity_strategy import NameSimilarityStrategy
from .strategies.profile_nis_strategy import ProfileNisStrategy
from .strategies.single_orphan_strategy import SingleOrphanStrategy


@dataclass
class MatchStrategyFactory:
    """Factory Pattern: build the ordered strategy pipeline.

    The order is part of the contract: direct link, profile NIS, email/NIS
    pattern, name similarity, single orphan.
    """

    settings: ResolverSettings = field(default_factory=ResolverSettings)

    def build(self, students: StudentRepository) -> List[MatchStrategy]:
        pipeline: List[MatchStrategy] = [
            DirectLinkStrategy(students),
            ProfileNisStrategy(students),
        ]
        if self.settings.match_email_nis:
            pipeline.append(EmailNisPatternStrategy(students, min_length=self.settings.email_nis_min_length))
        pipeline.append(NameSimilarityStrategy(students))
        pipeline.append(SingleOrphanStrategy(students))
        return pipeline
