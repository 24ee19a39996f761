from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.decorators import current_claims, make_login_required
from ..common.http import json_body, query_arg
from ..common.records import to_wire
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.token_service)

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance():
        records = container.attendance_service.list_records(
            employee_id=query_arg("employeeId"),
            date=query_arg("date"),
        )
        return jsonify([to_wire(r) for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="create_attendance")
    @login_required
    def create_attendance():
        claims = current_claims()
        record = container.attendance_service.create_record(
            current_role=claims.role,
            current_user_id=claims.user_id,
            payload=json_body(),
        )
        return jsonify(to_wire(record)), 201

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="check_in")
    @login_required
    def check_in():
        claims = current_claims()
        body = request.get_json(silent=True) or {}
        record = container.attendance_service.check_in(
            current_role=claims.role,
            current_user_id=claims.user_id,
            employee_id=body.get("employeeId") if isinstance(body, dict) else None,
        )
        return jsonify(to_wire(record)), 201

    @app.route("/api/attendance/<record_id>/check-out", methods=["POST"], endpoint="check_out")
    @login_required
    def check_out(record_id: str):
        claims = current_claims()
        record = container.attendance_service.check_out(
            current_role=claims.role,
            current_user_id=claims.user_id,
            record_id=record_id,
        )
        return jsonify(to_wire(record))
