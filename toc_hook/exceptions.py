"""Errors raised by the hook, each carrying the exit status it maps to."""


class TocHookError(RuntimeError):
    """Base class for failures that block the commit."""

    exit_code = 1


class MissingToolError(TocHookError):
    """Raised when the TOC tool cannot be found on PATH."""

    exit_code = 127

    def __init__(self, tool_name: str):
        super().__init__(f"TOC tool '{tool_name}' not found on PATH")
        self.tool_name = tool_name


class TocToolError(TocHookError):
    """Raised when the TOC tool exits non-zero for a file."""

    def __init__(self, tool_name: str, file_path: str, returncode: int):
        super().__init__(
            f"TOC tool '{tool_name}' failed on {file_path} (exit status {returncode})"
        )
        self.tool_name = tool_name
        self.file_path = file_path
        self.returncode = returncode
        # Killed by a signal reports a negative returncode
        self.exit_code = returncode if returncode > 0 else 1


class ToolNotExecutableError(TocHookError):
    """Raised when the TOC tool is on PATH but cannot be started."""

    exit_code = 126

    def __init__(self, tool_name: str, file_path: str, reason: str):
        super().__init__(
            f"TOC tool '{tool_name}' could not be run on {file_path}: {reason}"
        )
        self.tool_name = tool_name
        self.file_path = file_path


class StatusParseError(TocHookError):
    """Raised for a porcelain record that cannot be split into status and path."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"Cannot parse status record {line!r}: {reason}")
        self.line = line


class NotARepositoryError(TocHookError):
    """Raised when the working directory is not inside a git work tree."""

    exit_code = 128


class HookExistsError(TocHookError):
    """Raised when a foreign pre-commit hook is already installed."""
