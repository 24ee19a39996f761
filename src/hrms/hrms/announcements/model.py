from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import AnnouncementPriority


@dataclass(frozen=True)
class Announcement:
    id: str
    title: str
    message: str
    published_on: str = field(metadata={"wire": "date"})
    priority: AnnouncementPriority = AnnouncementPriority.MEDIUM
