from __future__ import annotations

import logging
from typing import Optional

from ..core.errors import NotFoundError
from ..models import StudentCreate, StudentRecord
from .repository import StudentRepository
from .transactions import TransactionManager


logger = logging.getLogger(__name__)


class StudentService:
    """Student CRUD. A missing student is reported, not raised."""

    def __init__(
        self,
        repository: StudentRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.repository = repository
        self.transaction_manager = transaction_manager

    def _report_missing(self, student_id: int, operation: str) -> None:
        logger.info(
            "student.not_found",
            extra={"student_id": student_id, "operation": operation},
        )

    def create_student(self, payload: StudentCreate) -> StudentRecord:
        student = StudentRecord(name=payload.name, course=payload.course)
        student_id = self.repository.create(student)
        student = student.model_copy(update={"id": student_id})
        logger.info(
            "student.created",
            extra={"student_id": student_id, "course": student.course},
        )
        return student

    def read_student(self, student_id: int) -> Optional[StudentRecord]:
        student = self.repository.fetch(student_id)
        if student is None:
            self._report_missing(student_id, "read")
        return student

    def update_student(self, student_id: int, course: str) -> Optional[StudentRecord]:
        try:
            with self.transaction_manager.atomic():
                student = self.repository.fetch(student_id, for_update=True)
                if student is None:
                    self._report_missing(student_id, "update")
                    return None
                student = student.model_copy(update={"course": course})
                self.repository.update(student)
        except NotFoundError:
            # Deleted between the read and the write.
            self._report_missing(student_id, "update")
            return None
        logger.info(
            "student.updated",
            extra={"student_id": student_id, "course": course},
        )
        return student

    def delete_student(self, student_id: int) -> bool:
        try:
            self.repository.delete(student_id)
        except NotFoundError:
            self._report_missing(student_id, "delete")
            return False
        logger.info("student.deleted", extra={"student_id": student_id})
        return True
