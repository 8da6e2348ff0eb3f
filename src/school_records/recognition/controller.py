from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, to_json
from ..container import Container
from ..students.controller import student_to_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/faces/<student_id>", methods=["POST"], endpoint="faces_register")
    def faces_register(student_id: str):
        data = json_body()
        profile = container.check_in_service.register_face(student_id, data.get("image") or "")
        return jsonify(to_json(profile)), 201

    @app.route("/api/faces/<student_id>", methods=["GET"], endpoint="faces_status")
    def faces_status(student_id: str):
        return jsonify({"student_id": student_id, "registered": container.faces_repo.has_registered_face(student_id)})

    @app.route("/api/check-in/face", methods=["POST"], endpoint="check_in_face")
    def check_in_face():
        data = json_body()
        result = container.check_in_service.check_in_by_face(data.get("image") or "")
        return (
            jsonify(
                {
                    "success": True,
                    "student": student_to_json(result.student),
                    "record": to_json(result.record),
                    "confidence": result.confidence,
                }
            ),
            201,
        )
