import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pytest

TOOL_NAME = "fake_update_markdown_toc"
TOC_MARKER = "<!-- toc -->"

# Appends a TOC marker once, logs every call, fails for $TOC_FAIL_ON
FAKE_TOOL_SCRIPT = """#!/bin/sh
if [ -n "$TOC_FAIL_ON" ] && [ "$1" = "$TOC_FAIL_ON" ]; then
  echo "cannot update $1" >&2
  exit 3
fi
printf '%s\\n' "$1" >> "$TOC_CALL_LOG"
if ! grep -qx '<!-- toc -->' "$1"; then
  printf '\\n<!-- toc -->\\n' >> "$1"
fi
"""


@dataclass
class FakeTocTool:
    name: str
    path: Path
    call_log: Path

    def calls(self) -> List[str]:
        if not self.call_log.exists():
            return []
        return self.call_log.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def toc_tool(tmp_path_factory, monkeypatch) -> FakeTocTool:
    """A TOC tool on PATH that appends a marker to the file it is given."""
    bin_dir = tmp_path_factory.mktemp("bin")
    tool_path = bin_dir / TOOL_NAME
    tool_path.write_text(FAKE_TOOL_SCRIPT, encoding="utf-8")
    tool_path.chmod(tool_path.stat().st_mode | stat.S_IXUSR)

    call_log = bin_dir / "calls.log"
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.setenv("TOC_CALL_LOG", str(call_log))
    monkeypatch.delenv("TOC_FAIL_ON", raising=False)
    return FakeTocTool(name=TOOL_NAME, path=tool_path, call_log=call_log)
