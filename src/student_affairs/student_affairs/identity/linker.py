from __future__ import annotations

from dataclasses import replace

from ..common.log import get_logger
from ..profiles.repository import ProfileRepository
from ..students.model import StudentRecord
from ..students.repository import StudentRepository

logger = get_logger(__name__)


class LinkingWriter:
    """The only code path that writes ``students.user_id``.

    The write is conditional on the column being NULL, so two accounts racing
    for the same record cannot both win; the loser gets False.
    """

    def __init__(self, students: StudentRepository, profiles: ProfileRepository):
        self._students = students
        self._profiles = profiles

    def link(self, student: StudentRecord, account_id: str) -> bool:
        if not self._students.link_account(student_id=student.id, account_id=account_id):
            logger.warning("Link refused: student %s (NIS %s) is already linked", student.id, student.nis)
            return False

        logger.info("Linked student %s (NIS %s) to account %s", student.id, student.nis, account_id)
        self.mirror_on_profile(account_id, student.id)
        return True

    def mirror_on_profile(self, account_id: str, student_id: str) -> None:
        if not self._profiles.set_student_id(profile_id=account_id, student_id=student_id):
            logger.debug("No profile %s to record student_id on", account_id)

    @staticmethod
    def linked_copy(student: StudentRecord, account_id: str) -> StudentRecord:
        return replace(student, linked_account_id=account_id)
