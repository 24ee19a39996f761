from __future__ import annotations

from flask import Flask, jsonify

from ..auth.decorators import current_claims, make_login_required
from ..common.http import json_body, query_arg
from ..common.records import to_wire
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.token_service)

    @app.route("/api/files", methods=["GET"], endpoint="list_files")
    @login_required
    def list_files():
        files = container.file_service.list_files(
            employee_id=query_arg("employeeId"),
            category=query_arg("category"),
        )
        return jsonify([to_wire(f) for f in files])

    @app.route("/api/files", methods=["POST"], endpoint="upload_file")
    @login_required
    def upload_file():
        claims = current_claims()
        uploaded = container.file_service.upload(
            current_role=claims.role,
            current_user_id=claims.user_id,
            payload=json_body(),
        )
        return jsonify(to_wire(uploaded)), 201

    @app.route("/api/files/<file_id>", methods=["DELETE"], endpoint="delete_file")
    @login_required
    def delete_file(file_id: str):
        claims = current_claims()
        container.file_service.delete_file(
            current_role=claims.role,
            current_user_id=claims.user_id,
            file_id=file_id,
        )
        return "", 204
