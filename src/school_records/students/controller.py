from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, json_body, recover_with, to_json
from ..container import Container
from .model import Student

_EDITABLE = ("first_name", "last_name", "student_code", "level", "section", "grade", "parent_id", "photo_url")


def student_to_json(student: Student) -> dict:
    data = to_json(student)
    data["full_name"] = student.full_name
    return data


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    @recover_with(list)
    def students_list():
        return jsonify([student_to_json(s) for s in container.student_service.list_students()])

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    def students_create():
        data = json_body()
        student = container.student_service.add_student(
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            level=data.get("level") or "",
            section=str(data.get("section") or ""),
            student_code=data.get("student_code"),
            parent_id=data.get("parent_id"),
            photo_url=data.get("photo_url"),
        )
        return jsonify(student_to_json(student)), 201

    @app.route("/api/students/code", methods=["GET"], endpoint="students_generate_code")
    def students_generate_code():
        code = container.students_repo.generate_code(
            request.args.get("level", ""),
            request.args.get("grade", ""),
            request.args.get("section", ""),
        )
        return jsonify({"code": code})

    @app.route("/api/students/by-code/<code>", methods=["GET"], endpoint="students_by_code")
    def students_by_code(code: str):
        student = container.students_repo.get_by_code(code)
        if not student:
            return error_response("Estudiante no encontrado", 404)
        return jsonify(student_to_json(student))

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="students_detail")
    def students_detail(student_id: str):
        return jsonify(student_to_json(container.student_service.get_student(student_id)))

    @app.route("/api/students/<student_id>", methods=["PATCH"], endpoint="students_update")
    def students_update(student_id: str):
        data = json_body()
        changes = {k: v for k, v in data.items() if k in _EDITABLE}
        student = container.student_service.update_student(student_id, changes)
        return jsonify(student_to_json(student))

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(student_id: str):
        container.student_service.delete_student(student_id)
        return "", 204
