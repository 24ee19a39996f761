from __future__ import annotations

from flask import Flask, jsonify

from ..auth.decorators import current_claims, make_login_required
from ..common.http import json_body, query_arg
from ..common.records import to_wire
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.token_service)

    @app.route("/api/payroll", methods=["GET"], endpoint="list_payroll")
    @login_required
    def list_payroll():
        records = container.payroll_service.list_records(
            employee_id=query_arg("employeeId"),
            status=query_arg("status"),
        )
        return jsonify([to_wire(r) for r in records])

    @app.route("/api/payroll", methods=["POST"], endpoint="create_payroll")
    @login_required
    def create_payroll():
        record = container.payroll_service.create_record(current_role=current_claims().role, payload=json_body())
        return jsonify(to_wire(record)), 201

    @app.route("/api/payroll/<record_id>/status", methods=["PATCH"], endpoint="patch_payroll_status")
    @login_required
    def patch_payroll_status(record_id: str):
        body = json_body()
        record = container.payroll_service.patch_status(
            current_role=current_claims().role,
            record_id=record_id,
            status=body.get("status"),
        )
        return jsonify(to_wire(record))
