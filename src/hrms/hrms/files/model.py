from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import FileCategory


@dataclass(frozen=True)
class UploadedFile:
    """Domain entity: a document attached to an employee.

    ``data_url`` is an optional inline payload (e.g. a ``data:`` URL); the
    store treats it as an opaque string.
    """

    id: str
    employee_id: str
    name: str
    mime_type: str = field(metadata={"wire": "type"})
    size: str
    category: FileCategory
    uploaded_on: str
    data_url: Optional[str] = None
