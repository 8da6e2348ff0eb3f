from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, recover_with, to_json
from ..container import Container
from ..students.controller import student_to_json
from .model import AttendanceStats


def _empty_stats() -> AttendanceStats:
    return AttendanceStats(total=0, present=0, absent=0, present_pct=0, absent_pct=0)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_register")
    def attendance_register():
        data = json_body()
        record = container.attendance_service.register(
            str(data.get("student_id") or ""),
            status=data.get("status") or "present",
            arrival_time=data.get("arrival_time"),
            absence_date=data.get("absence_date"),
        )
        return jsonify(to_json(record)), 201

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @recover_with(list)
    def attendance_list():
        day = request.args.get("date")
        if day:
            records = container.attendance_repo.get_by_date(day)
        else:
            records = container.attendance_repo.list()
        return jsonify(to_json(records))

    @app.route("/api/attendance/roll-call", methods=["GET"], endpoint="attendance_roll_call")
    @recover_with(list)
    def attendance_roll_call():
        rows = container.attendance_service.roll_call(request.args.get("date"))
        return jsonify(
            [
                {"student": student_to_json(r.student), "record": to_json(r.record), "status": r.status_label}
                for r in rows
            ]
        )

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    @recover_with(_empty_stats)
    def attendance_stats():
        stats = container.attendance_service.stats(request.args.get("start", ""), request.args.get("end", ""))
        return jsonify(to_json(stats))

    @app.route("/api/students/<student_id>/attendance", methods=["GET"], endpoint="attendance_history")
    @recover_with(list)
    def attendance_history(student_id: str):
        return jsonify(to_json(container.attendance_service.history(student_id)))
