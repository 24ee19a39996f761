from __future__ import annotations

from flask import Flask, jsonify

from ..auth.decorators import bearer_token, current_claims, make_login_required
from ..common.http import json_body
from ..common.validators import require_fields
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.token_service)

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        require_fields(body, ("email", "password"))
        result = container.auth_service.authenticate(body["email"], body["password"])
        return jsonify({"user": result.user.to_public(), "token": result.token})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    @login_required
    def logout():
        container.auth_service.logout(bearer_token())
        return "", 204

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        user = container.auth_service.current_user(current_claims())
        return jsonify(user.to_public())

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @login_required
    def list_users():
        return jsonify([u.to_public() for u in container.user_service.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @login_required
    def create_user():
        user = container.user_service.create_user(current_role=current_claims().role, payload=json_body())
        return jsonify(user.to_public()), 201

    @app.route("/api/users/<user_id>", methods=["PUT"], endpoint="update_user")
    @login_required
    def update_user(user_id: str):
        claims = current_claims()
        user = container.user_service.update_user(
            current_role=claims.role,
            current_user_id=claims.user_id,
            user_id=user_id,
            payload=json_body(),
        )
        return jsonify(user.to_public())

    @app.route("/api/users/<user_id>/password", methods=["POST"], endpoint="change_password")
    @login_required
    def change_password(user_id: str):
        body = json_body()
        require_fields(body, ("currentPassword", "newPassword"))
        container.user_service.change_password(
            current_user_id=current_claims().user_id,
            user_id=user_id,
            current_password=body["currentPassword"],
            new_password=body["newPassword"],
        )
        return "", 204

    @app.route("/api/users/<user_id>", methods=["DELETE"], endpoint="delete_user")
    @login_required
    def delete_user(user_id: str):
        claims = current_claims()
        container.user_service.delete_user(
            current_role=claims.role,
            current_user_id=claims.user_id,
            user_id=user_id,
        )
        return "", 204
