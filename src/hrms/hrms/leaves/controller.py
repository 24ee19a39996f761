from __future__ import annotations

from flask import Flask, jsonify

from ..auth.decorators import current_claims, make_login_required
from ..common.http import json_body, query_arg
from ..common.records import to_wire
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.token_service)

    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    @login_required
    def list_leaves():
        leaves = container.leave_service.list_requests(
            employee_id=query_arg("employeeId"),
            status=query_arg("status"),
        )
        return jsonify([to_wire(l) for l in leaves])

    @app.route("/api/leaves", methods=["POST"], endpoint="create_leave")
    @login_required
    def create_leave():
        claims = current_claims()
        leave = container.leave_service.create_leave(
            current_role=claims.role,
            current_user_id=claims.user_id,
            payload=json_body(),
        )
        return jsonify(to_wire(leave)), 201

    @app.route("/api/leaves/<request_id>/status", methods=["PATCH"], endpoint="patch_leave_status")
    @login_required
    def patch_leave_status(request_id: str):
        body = json_body()
        leave = container.leave_service.patch_status(
            current_role=current_claims().role,
            request_id=request_id,
            status=body.get("status"),
        )
        return jsonify(to_wire(leave))
