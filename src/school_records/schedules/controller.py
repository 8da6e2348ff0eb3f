from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, recover_with, to_json
from ..container import Container
from .model import ClassInfo


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedule", methods=["GET"], endpoint="schedule_full")
    @recover_with(dict)
    def schedule_full():
        return jsonify(to_json(container.schedules_repo.get_full()))

    @app.route("/api/schedule/current", methods=["GET"], endpoint="schedule_current")
    @recover_with(list)
    def schedule_current():
        return jsonify(to_json(container.schedules_repo.get_current()))

    @app.route("/api/schedule/teacher/<teacher_name>", methods=["GET"], endpoint="schedule_teacher")
    @recover_with(list)
    def schedule_teacher(teacher_name: str):
        return jsonify(to_json(container.schedules_repo.get_for_teacher(teacher_name)))

    @app.route("/api/schedule/<day>", methods=["GET"], endpoint="schedule_day")
    @recover_with(dict)
    def schedule_day(day: str):
        return jsonify(to_json(container.schedules_repo.get_for_day(day)))

    @app.route("/api/schedule/<day>", methods=["PUT"], endpoint="schedule_update")
    def schedule_update(day: str):
        data = json_body()
        info = ClassInfo(
            subject=data.get("subject") or "",
            teacher=data.get("teacher") or "",
            room=data.get("room") or "",
        )
        container.schedules_repo.update_class(day, data.get("time_slot") or "", info)
        return jsonify({"success": True})
