"""Installs the commit hook into a repository's hooks directory."""

import shlex
import stat
import sys
from pathlib import Path
from typing import Optional

from ..exceptions import HookExistsError

HOOK_NAME = "pre-commit"
HOOK_MARKER = "# installed by toc-hook"

HOOK_TEMPLATE = """#!/bin/sh
{marker}
# Regenerates the TOC of staged Markdown files before each commit.
exec {command}
"""


def default_command() -> str:
    """Command the hook script runs, bound to the current interpreter."""
    return f"{shlex.quote(sys.executable)} -m toc_hook run"


def is_own_hook(hook_path: Path) -> bool:
    """Check whether hook_path was written by this tool."""
    try:
        return HOOK_MARKER in hook_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False


def install_hook(
    hooks_dir: Path, force: bool = False, command: Optional[str] = None
) -> Path:
    """Write an executable pre-commit hook and return its path."""
    hook_path = Path(hooks_dir) / HOOK_NAME
    if hook_path.exists() and not force and not is_own_hook(hook_path):
        raise HookExistsError(
            f"{hook_path} already exists; use --force to replace it"
        )

    hook_path.parent.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(
        HOOK_TEMPLATE.format(marker=HOOK_MARKER, command=command or default_command()),
        encoding="utf-8",
    )
    mode = hook_path.stat().st_mode
    hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    print(f"Installed {HOOK_NAME} hook at {hook_path}")
    return hook_path


def uninstall_hook(hooks_dir: Path) -> bool:
    """Remove the pre-commit hook if this tool installed it."""
    hook_path = Path(hooks_dir) / HOOK_NAME
    if not hook_path.exists():
        print(f"No {HOOK_NAME} hook at {hook_path}")
        return False
    if not is_own_hook(hook_path):
        print(f"Leaving {hook_path} in place: not installed by toc-hook")
        return False

    hook_path.unlink()
    print(f"Removed {HOOK_NAME} hook at {hook_path}")
    return True
