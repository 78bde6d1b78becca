"""Services for the commit hook."""

from .commit_hook import CommitHook
from .git_manager import GitManager
from .git_manager_factory import (
    create_git_manager,
    create_git_manager_from_settings,
)
from .hook_installer import install_hook, uninstall_hook
from .toc_runner import TocRunner

__all__ = [
    "CommitHook",
    "GitManager",
    "TocRunner",
    "create_git_manager",
    "create_git_manager_from_settings",
    "install_hook",
    "uninstall_hook",
]
