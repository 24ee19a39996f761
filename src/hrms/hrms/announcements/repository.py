from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from .model import Announcement


class AnnouncementRepository(Protocol):
    def get(self, record_id: str) -> Optional[Announcement]:
        raise NotImplementedError

    def list(self, predicate: Optional[Callable[[Announcement], bool]] = None) -> Sequence[Announcement]:
        raise NotImplementedError

    def create(self, record: Announcement) -> Announcement:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError
