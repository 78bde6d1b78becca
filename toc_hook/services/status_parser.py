"""Parser for `git status --porcelain` (v1) output."""

from typing import Iterable, List, Optional, Tuple

from ..exceptions import StatusParseError
from ..schemas import ChangeStatus, StatusEntry

RENAME_SEPARATOR = " -> "

_INDEX_STATUSES = {status.value: status for status in ChangeStatus}


def strip_quotes(file_path: str) -> str:
    """Drop one leading and one trailing double quote, if present.

    Git wraps paths containing spaces or special characters in quotes. Escapes
    inside the quotes are left alone, and a filename that genuinely starts or
    ends with a quote loses it.
    """
    if file_path.startswith('"'):
        file_path = file_path[1:]
    if file_path.endswith('"'):
        file_path = file_path[:-1]
    return file_path


def _split_rename(line: str, paths: str) -> Tuple[str, str]:
    """Split `SOURCE -> DEST` into its two sides."""
    if paths.startswith('"'):
        # Quoted source: find the closing quote, skipping escaped characters
        index = 1
        while index < len(paths):
            char = paths[index]
            if char == "\\":
                index += 2
                continue
            if char == '"':
                break
            index += 1
        else:
            raise StatusParseError(line, "unterminated quoted path")

        source, rest = paths[: index + 1], paths[index + 1 :]
        if not rest.startswith(RENAME_SEPARATOR):
            raise StatusParseError(line, "missing rename separator")
        return source, rest[len(RENAME_SEPARATOR) :]

    source, separator, destination = paths.partition(RENAME_SEPARATOR)
    if not separator:
        raise StatusParseError(line, "missing rename separator")
    return source, destination


def parse_status_line(line: str) -> Optional[StatusEntry]:
    """Parse one porcelain record.

    Returns None for records the hook ignores: anything whose index column is
    not added, modified or renamed.
    """
    if len(line) < 4 or line[2] != " ":
        raise StatusParseError(line, "expected 'XY PATH'")

    status = _INDEX_STATUSES.get(line[0])
    if status is None:
        return None

    paths = line[3:]
    if status is ChangeStatus.RENAMED:
        source, destination = _split_rename(line, paths)
        return StatusEntry(
            status=status,
            file_path=strip_quotes(destination),
            source_path=strip_quotes(source),
        )

    return StatusEntry(status=status, file_path=strip_quotes(paths))


def parse_porcelain(output: str) -> List[StatusEntry]:
    """Parse full porcelain output, keeping the order git reported."""
    entries = []
    for line in output.split("\n"):
        if not line.strip():
            continue
        entry = parse_status_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def select_markdown_paths(
    entries: Iterable[StatusEntry], suffix: str = ".md"
) -> List[str]:
    """Paths of Markdown entries in status order, each listed once."""
    paths: List[str] = []
    for entry in entries:
        if entry.file_path.endswith(suffix) and entry.file_path not in paths:
            paths.append(entry.file_path)
    return paths
