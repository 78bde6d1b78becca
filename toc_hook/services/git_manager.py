import sys
from pathlib import Path
from typing import List, Optional

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from ..exceptions import NotARepositoryError
from .status_parser import parse_porcelain, select_markdown_paths


class GitManager:
    """Manages the git operations the commit hook needs."""

    def __init__(self, local_path: str = ".", debug: bool = False):
        self.local_path = Path(local_path)
        self.debug = debug
        self.repo: Optional[Repo] = None

    def open_repository(self) -> Repo:
        """Open the repository containing local_path."""
        try:
            self.repo = Repo(self.local_path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise NotARepositoryError(
                f"Not a git repository: {self.local_path.resolve()}"
            ) from e

        if self.repo.bare:
            raise NotARepositoryError(
                f"Repository has no work tree: {self.repo.git_dir}"
            )

        if self.debug:
            print(
                f"Repository opened at {self.repo.working_tree_dir}", file=sys.stderr
            )
        return self.repo

    def _require_repo(self) -> Repo:
        if not self.repo:
            raise RuntimeError("Repository not initialized")
        return self.repo

    @property
    def working_dir(self) -> Path:
        """Root of the work tree; porcelain paths are relative to it."""
        return Path(self._require_repo().working_tree_dir)

    def get_status_porcelain(self) -> str:
        """Get `git status --porcelain` output with unescaped non-ASCII names."""
        repo = self._require_repo()
        return repo.git.execute(
            ["git", "-c", "core.quotePath=false", "status", "--porcelain"]
        )

    def get_staged_markdown_files(self, suffix: str = ".md") -> List[str]:
        """Get Markdown files added, modified or renamed in the index."""
        output = self.get_status_porcelain()
        if self.debug:
            for line in filter(None, output.split("\n")):
                print(f"status: {line}", file=sys.stderr)
        return select_markdown_paths(parse_porcelain(output), suffix)

    def stage_file(self, file_path: str) -> None:
        """Re-add a file to the index."""
        # The git CLI honours GIT_INDEX_FILE, which git sets for `commit -a`
        self._require_repo().git.add("--", file_path)

    def get_hooks_dir(self) -> Path:
        """Get the directory git runs hooks from."""
        repo = self._require_repo()
        hooks_path = repo.config_reader().get_value("core", "hooksPath", "")
        if hooks_path:
            hooks_dir = Path(str(hooks_path)).expanduser()
            if not hooks_dir.is_absolute():
                hooks_dir = self.working_dir / hooks_dir
            return hooks_dir
        return Path(repo.common_dir) / "hooks"
