from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import today_iso
from ..common.ids import generate_id
from ..common.records import from_wire, require_known_fields
from ..common.validators import require_choice, require_fields, require_iso_date, require_non_empty
from ..core.enums import FileCategory, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import UploadedFile
from .repository import FileRepository

logger = logging.getLogger(__name__)


def describe_size(num_bytes: int) -> str:
    """Human size label: KB below one megabyte, MB from there on."""
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


class FileService:
    def __init__(self, files: FileRepository, users: UserRepository):
        self._files = files
        self._users = users

    def list_files(
        self,
        *,
        employee_id: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Sequence[UploadedFile]:
        wanted = require_choice(category, FileCategory, "category") if category else None

        def keep(f: UploadedFile) -> bool:
            if employee_id and f.employee_id != employee_id:
                return False
            if wanted and f.category != wanted:
                return False
            return True

        return self._files.list(keep)

    def upload(self, *, current_role: Role, current_user_id: str, payload: Mapping[str, Any]) -> UploadedFile:
        require_known_fields(UploadedFile, payload, allow=("sizeBytes",))
        require_fields(payload, ("name", "type"))
        require_non_empty(payload["name"], "name")
        if "uploadedOn" in payload:
            require_iso_date(payload["uploadedOn"], "uploadedOn")
        if payload.get("dataUrl") is not None and not isinstance(payload["dataUrl"], str):
            raise ValidationError("dataUrl must be a string")

        employee_id = payload.get("employeeId") or current_user_id
        if current_role != Role.ADMIN and employee_id != current_user_id:
            raise AuthorizationError("You can only upload your own files")
        if not self._users.get(employee_id):
            raise ValidationError(f"Unknown employee: {employee_id}")

        size = payload.get("size")
        if not size and isinstance(payload.get("sizeBytes"), int):
            size = describe_size(payload["sizeBytes"])

        defaults = {
            "id": generate_id(),
            "category": FileCategory.OTHER.value,
            "uploadedOn": today_iso(),
        }
        data = {k: v for k, v in payload.items() if k != "sizeBytes"}
        data = {**defaults, **data, "employeeId": employee_id, "size": size or ""}
        if not data.get("id"):
            data["id"] = defaults["id"]

        uploaded = self._files.create(from_wire(UploadedFile, data))
        logger.info("File %s (%s) uploaded for %s", uploaded.id, uploaded.category.value, uploaded.employee_id)
        return uploaded

    def delete_file(self, *, current_role: Role, current_user_id: str, file_id: str) -> None:
        uploaded = self._files.get(file_id)
        if not uploaded:
            raise NotFoundError("File not found")
        if current_role != Role.ADMIN and uploaded.employee_id != current_user_id:
            raise AuthorizationError("You can only delete your own files")

        self._files.delete(file_id)
        logger.info("File %s deleted", file_id)
