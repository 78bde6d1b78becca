import argparse
import sys
from typing import List, Optional

from git.exc import GitCommandError
from pydantic import ValidationError

from toc_hook import __version__
from toc_hook.config.settings import Settings, get_settings
from toc_hook.exceptions import TocHookError
from toc_hook.protocols.git_manager_protocol import GitManagerProtocol
from toc_hook.services import (
    CommitHook,
    TocRunner,
    create_git_manager_from_settings,
    install_hook,
    uninstall_hook,
)

# --- Command handlers ---


def get_git_manager(settings: Settings) -> GitManagerProtocol:
    """Return the GitManager for the current working directory."""
    return create_git_manager_from_settings(settings)


def run_hook(args: argparse.Namespace, settings: Settings) -> int:
    toc_runner = TocRunner(args.tool or settings.TOOL, debug=settings.DEBUG)
    hook = CommitHook(get_git_manager(settings), toc_runner, settings.MARKDOWN_SUFFIX)
    hook.run()
    return 0


def list_files(args: argparse.Namespace, settings: Settings) -> int:
    git_manager = get_git_manager(settings)
    git_manager.open_repository()
    for file_path in git_manager.get_staged_markdown_files(settings.MARKDOWN_SUFFIX):
        print(file_path)
    return 0


def install(args: argparse.Namespace, settings: Settings) -> int:
    git_manager = get_git_manager(settings)
    git_manager.open_repository()
    install_hook(git_manager.get_hooks_dir(), force=args.force)
    return 0


def uninstall(args: argparse.Namespace, settings: Settings) -> int:
    git_manager = get_git_manager(settings)
    git_manager.open_repository()
    uninstall_hook(git_manager.get_hooks_dir())
    return 0


# --- Argument parsing ---


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toc-hook",
        description="Regenerate the TOC of staged Markdown files before a commit",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.set_defaults(handler=run_hook, tool=None)
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser(
        "run", help="Update and re-stage Markdown TOCs (default)"
    )
    run_parser.add_argument(
        "--tool", help="TOC rewriting executable (default: $TOC_HOOK_TOOL)"
    )
    run_parser.set_defaults(handler=run_hook)

    list_parser = subparsers.add_parser(
        "list", help="Print the Markdown files the hook would update"
    )
    list_parser.set_defaults(handler=list_files)

    install_parser = subparsers.add_parser(
        "install", help="Install the pre-commit hook in this repository"
    )
    install_parser.add_argument(
        "--force", action="store_true", help="Replace an existing pre-commit hook"
    )
    install_parser.set_defaults(handler=install)

    uninstall_parser = subparsers.add_parser(
        "uninstall", help="Remove the pre-commit hook installed by toc-hook"
    )
    uninstall_parser.set_defaults(handler=uninstall)

    return parser


def _describe_settings_error(error: ValidationError) -> str:
    prefix = Settings.model_config.get("env_prefix", "")
    return "; ".join(
        f"{prefix}{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the toc-hook command. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        return args.handler(args, settings)
    except ValidationError as e:
        print(
            f"toc-hook: invalid settings: {_describe_settings_error(e)}",
            file=sys.stderr,
        )
        return 1
    except TocHookError as e:
        print(f"toc-hook: {e}", file=sys.stderr)
        return e.exit_code
    except GitCommandError as e:
        print(f"toc-hook: git failed: {e}", file=sys.stderr)
        return e.status if isinstance(e.status, int) and e.status > 0 else 1
    except KeyboardInterrupt:
        print("toc-hook: interrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
