from __future__ import annotations

from ..core.constants import FILES_KEY
from ..database.collection import Collection
from ..database.store import KeyValueStore
from .model import UploadedFile
from .repository import FileRepository


class StoreFileRepository(Collection[UploadedFile], FileRepository):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, FILES_KEY, UploadedFile, label="File")
