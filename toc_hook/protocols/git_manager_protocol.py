"""Git Manager protocol interface."""

from pathlib import Path
from typing import List, Protocol, runtime_checkable

from git import Repo


@runtime_checkable
class GitManagerProtocol(Protocol):
    """Protocol for the git operations the commit hook performs."""

    @property
    def working_dir(self) -> Path:
        """Work tree root."""
        ...

    def open_repository(self) -> Repo:
        """Open the repository. Raises NotARepositoryError outside a work tree."""
        ...

    def get_status_porcelain(self) -> str:
        """Get raw `git status --porcelain` output."""
        ...

    def get_staged_markdown_files(self, suffix: str = ".md") -> List[str]:
        """Get Markdown files about to be committed, in status order."""
        ...

    def stage_file(self, file_path: str) -> None:
        """Re-add a file to the index."""
        ...

    def get_hooks_dir(self) -> Path:
        """Get the directory git runs hooks from."""
        ...
