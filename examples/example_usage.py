"""Ejemplo: usar los servicios sin pasar por Flask.

Controllers are a thin layer; everything below runs on the in-memory backend.
"""

from school_records.container import build_container


def main():
    container = build_container()
    container.ensure_seeded()

    student = container.student_service.add_student(
        first_name="Sofía", last_name="Hernández", level="primary", section="3"
    )
    container.attendance_service.register(student.id, arrival_time="07:45")

    print(student.student_code)
    print(container.attendance_service.roll_call())
    print(container.grades_repo.get_for_student("1"))
    print(container.schedules_repo.get_for_day("Lunes"))


if __name__ == "__main__":
    main()
