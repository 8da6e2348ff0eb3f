from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, to_json
from ..container import Container
from .model import GradeEntry


def register(app: Flask, container: Container) -> None:
    # Grade reads propagate storage faults; the grades screen shows the error.

    @app.route("/api/students/<student_id>/grades", methods=["GET"], endpoint="grades_book")
    def grades_book(student_id: str):
        return jsonify(container.grades_repo.get_for_student(student_id))

    @app.route("/api/students/<student_id>/grades/entries", methods=["GET"], endpoint="grades_entries")
    def grades_entries(student_id: str):
        return jsonify(to_json(container.grades_repo.list_entries(student_id)))

    @app.route("/api/students/<student_id>/grades/<subject>/<period>", methods=["PUT"], endpoint="grades_update")
    def grades_update(student_id: str, subject: str, period: str):
        data = json_body()
        container.grades_repo.update_score(student_id, subject, period, data.get("score"))
        return jsonify(container.grades_repo.get_for_student(student_id)[subject])

    @app.route("/api/students/<student_id>/grades", methods=["POST"], endpoint="grades_add")
    def grades_add(student_id: str):
        data = json_body()
        entry = container.grades_repo.add_grade(
            student_id,
            GradeEntry(
                subject=data.get("subject") or "",
                period=data.get("period") or "",
                score=data.get("score"),
                comment=data.get("comment"),
            ),
        )
        return jsonify(to_json(entry)), 201
