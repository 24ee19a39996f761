from __future__ import annotations

from ..core.constants import ANNOUNCEMENTS_KEY
from ..database.collection import Collection
from ..database.store import KeyValueStore
from .model import Announcement
from .repository import AnnouncementRepository


class StoreAnnouncementRepository(Collection[Announcement], AnnouncementRepository):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, ANNOUNCEMENTS_KEY, Announcement, label="Announcement")
