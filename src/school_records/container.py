from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .app_logger import get_logger
from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.service import AttendanceService
from .grades.kv_grade_repository import KVGradeRepository
from .recognition.kv_face_profile_repository import KVFaceProfileRepository
from .recognition.recognizer import FaceRecognizer, RandomProfileRecognizer
from .recognition.service import CheckInService
from .schedules.kv_schedule_repository import KVScheduleRepository
from .storage.backend import KeyValueBackend
from .storage.memory_backend import InMemoryBackend
from .storage.store import CollectionStore
from .students.kv_student_repository import KVStudentRepository
from .students.service import StudentService

logger = get_logger(__name__)


@dataclass(frozen=True)
class Container:
    backend: KeyValueBackend
    store: CollectionStore

    students_repo: KVStudentRepository
    attendance_repo: KVAttendanceRepository
    grades_repo: KVGradeRepository
    schedules_repo: KVScheduleRepository
    faces_repo: KVFaceProfileRepository
    recognizer: FaceRecognizer

    student_service: StudentService
    attendance_service: AttendanceService
    check_in_service: CheckInService

    def ensure_seeded(self) -> None:
        """Write the demo dataset for every collection whose key is absent."""
        self.students_repo.ensure_seeded()
        self.grades_repo.ensure_seeded()
        self.schedules_repo.ensure_seeded()
        self.faces_repo.ensure_seeded()


def build_backend(*, storage: str = "memory", db_config: Optional[dict] = None, init_schema: bool = False) -> KeyValueBackend:
    if storage == "memory":
        return InMemoryBackend()
    if storage == "mysql":
        # Imported lazily so the memory profile runs without a MySQL driver configured
        from .storage.bootstrap import apply_schema
        from .storage.connection import DBConfig, DatabaseConnection
        from .storage.mysql_backend import MySQLKeyValueBackend

        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        if init_schema:
            apply_schema(conn)
        return MySQLKeyValueBackend(conn)
    raise ValueError(f"Unknown storage backend: {storage!r}")


def build_container(*, backend: Optional[KeyValueBackend] = None, recognizer: Optional[FaceRecognizer] = None) -> Container:
    backend = backend or InMemoryBackend()
    store = CollectionStore(backend)

    students_repo = KVStudentRepository(store)
    attendance_repo = KVAttendanceRepository(store)
    grades_repo = KVGradeRepository(store)
    schedules_repo = KVScheduleRepository(store)
    faces_repo = KVFaceProfileRepository(store)
    recognizer = recognizer or RandomProfileRecognizer(faces_repo)

    student_service = StudentService(students_repo, attendance_repo, grades_repo, faces_repo)
    attendance_service = AttendanceService(attendance_repo, students_repo)
    check_in_service = CheckInService(recognizer, faces_repo, students_repo, attendance_repo)

    logger.debug("Container built on %s", type(backend).__name__)
    return Container(
        backend=backend,
        store=store,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        grades_repo=grades_repo,
        schedules_repo=schedules_repo,
        faces_repo=faces_repo,
        recognizer=recognizer,
        student_service=student_service,
        attendance_service=attendance_service,
        check_in_service=check_in_service,
    )
