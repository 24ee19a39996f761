from __future__ import annotations

from flask import Flask, jsonify

from ..auth.decorators import current_claims, make_login_required
from ..common.http import json_body
from ..common.records import to_wire
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.token_service)

    @app.route("/api/announcements", methods=["GET"], endpoint="list_announcements")
    @login_required
    def list_announcements():
        return jsonify([to_wire(a) for a in container.announcement_service.list_announcements()])

    @app.route("/api/announcements", methods=["POST"], endpoint="create_announcement")
    @login_required
    def create_announcement():
        announcement = container.announcement_service.publish(current_role=current_claims().role, payload=json_body())
        return jsonify(to_wire(announcement)), 201

    @app.route("/api/announcements/<announcement_id>", methods=["DELETE"], endpoint="delete_announcement")
    @login_required
    def delete_announcement(announcement_id: str):
        container.announcement_service.delete(current_role=current_claims().role, announcement_id=announcement_id)
        return "", 204
