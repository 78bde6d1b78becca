import shutil
import subprocess
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..exceptions import MissingToolError, TocToolError, ToolNotExecutableError


@contextmanager
def _child_process(
    args: List[str], cwd: Optional[Path]
) -> Iterator[subprocess.Popen]:
    """Run a child process that is always reaped when the block exits."""
    process = subprocess.Popen(args, cwd=cwd)
    try:
        yield process
    except BaseException:
        # Interrupted or failed while the child is running
        process.kill()
        raise
    finally:
        process.wait()


class TocRunner:
    """Runs the external tool that rewrites a Markdown file's TOC in place."""

    def __init__(self, tool_name: str = "update_markdown_toc", debug: bool = False):
        self.tool_name = tool_name
        self.debug = debug
        self._executable: Optional[str] = None

    def resolve(self) -> str:
        """Locate the tool on PATH."""
        executable = shutil.which(self.tool_name)
        if executable is None:
            raise MissingToolError(self.tool_name)
        if self.debug:
            print(f"Using TOC tool {executable}", file=sys.stderr)
        self._executable = executable
        return executable

    def update(self, file_path: str, cwd: Optional[Union[str, Path]] = None) -> None:
        """Rewrite the TOC of file_path, raising TocToolError on failure."""
        executable = self._executable or self.resolve()
        try:
            with _child_process(
                [executable, file_path], Path(cwd) if cwd is not None else None
            ) as process:
                returncode = process.wait()
        except OSError as e:
            # e.g. a script without a shebang, or no execute permission
            raise ToolNotExecutableError(
                self.tool_name, file_path, e.strerror or str(e)
            ) from e

        if returncode != 0:
            raise TocToolError(self.tool_name, file_path, returncode)
