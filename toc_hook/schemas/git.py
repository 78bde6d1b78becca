from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ChangeStatus(str, Enum):
    """Index statuses the hook acts on."""

    ADDED = "A"
    MODIFIED = "M"
    RENAMED = "R"


class StatusEntry(BaseModel):
    """Represents one record of `git status --porcelain`."""

    status: ChangeStatus
    file_path: str
    source_path: Optional[str] = None  # For renamed files, never processed
