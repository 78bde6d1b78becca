from .git import ChangeStatus, StatusEntry
from .hook import RunReport

__all__ = ["ChangeStatus", "RunReport", "StatusEntry"]
