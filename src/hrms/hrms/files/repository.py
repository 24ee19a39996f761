from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from .model import UploadedFile


class FileRepository(Protocol):
    def get(self, record_id: str) -> Optional[UploadedFile]:
        raise NotImplementedError

    def list(self, predicate: Optional[Callable[[UploadedFile], bool]] = None) -> Sequence[UploadedFile]:
        raise NotImplementedError

    def count(self, predicate: Optional[Callable[[UploadedFile], bool]] = None) -> int:
        raise NotImplementedError

    def create(self, record: UploadedFile) -> UploadedFile:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError
