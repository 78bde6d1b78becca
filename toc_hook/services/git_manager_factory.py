"""Factory for creating GitManager instances from settings."""

from ..config.settings import Settings
from ..protocols.git_manager_protocol import GitManagerProtocol
from .git_manager import GitManager


def create_git_manager(
    local_path: str = ".", debug_mode: bool = False
) -> GitManagerProtocol:
    """
    Create a GitManager for the repository containing local_path.

    Args:
        local_path: Any path inside the work tree
        debug_mode: If True, the manager prints each status record

    Returns:
        GitManagerProtocol implementation
    """
    return GitManager(local_path=local_path, debug=debug_mode)


def create_git_manager_from_settings(
    settings: Settings, local_path: str = "."
) -> GitManagerProtocol:
    """
    Create a GitManager instance using hook settings.

    Args:
        settings: Hook settings
        local_path: Any path inside the work tree

    Returns:
        GitManagerProtocol implementation
    """
    return create_git_manager(local_path=local_path, debug_mode=settings.DEBUG)
