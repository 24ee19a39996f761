from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import today_iso
from ..common.ids import generate_id
from ..common.records import from_wire, require_known_fields
from ..common.validators import require_fields, require_iso_date, require_non_empty
from ..core.enums import AnnouncementPriority, Role
from ..core.exceptions import AuthorizationError
from .model import Announcement
from .repository import AnnouncementRepository

logger = logging.getLogger(__name__)


class AnnouncementService:
    """Company-wide notices: everyone reads, only admins publish or remove."""

    def __init__(self, announcements: AnnouncementRepository):
        self._announcements = announcements

    def list_announcements(self) -> Sequence[Announcement]:
        return self._announcements.list()

    def publish(self, *, current_role: Role, payload: Mapping[str, Any]) -> Announcement:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can publish announcements")

        require_known_fields(Announcement, payload)
        require_fields(payload, ("title", "message"))
        require_non_empty(payload["title"], "title")
        require_non_empty(payload["message"], "message")
        if "date" in payload:
            require_iso_date(payload["date"], "date")

        defaults = {
            "id": generate_id(),
            "date": today_iso(),
            "priority": AnnouncementPriority.MEDIUM.value,
        }
        data = {**defaults, **payload}
        if not data.get("id"):
            data["id"] = defaults["id"]

        announcement = self._announcements.create(from_wire(Announcement, data))
        logger.info("Announcement %s published (%s)", announcement.id, announcement.priority.value)
        return announcement

    def delete(self, *, current_role: Role, announcement_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can delete announcements")

        self._announcements.delete(announcement_id)
        logger.info("Announcement %s deleted", announcement_id)
