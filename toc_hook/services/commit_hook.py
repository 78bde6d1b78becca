"""Coordinates TOC regeneration for the files about to be committed."""

from typing import List

from ..protocols.git_manager_protocol import GitManagerProtocol
from ..schemas import RunReport
from .toc_runner import TocRunner


class CommitHook:
    """Refreshes and re-stages the TOC of every Markdown file in the commit."""

    def __init__(
        self,
        git_manager: GitManagerProtocol,
        toc_runner: TocRunner,
        suffix: str = ".md",
    ):
        self.git_manager = git_manager
        self.toc_runner = toc_runner
        self.suffix = suffix

    def collect(self) -> List[str]:
        """Markdown files added, modified or renamed in the index, in status order."""
        return self.git_manager.get_staged_markdown_files(self.suffix)

    def run(self) -> RunReport:
        """
        Regenerate the TOC of each collected file and re-stage it.

        The TOC tool is looked up before git is queried, so a missing tool
        leaves the work tree untouched. The first tool failure stops the run;
        files handled before it stay staged.
        """
        self.toc_runner.resolve()
        self.git_manager.open_repository()

        report = RunReport()
        file_paths = self.collect()
        if not file_paths:
            print("No Markdown files to update")
            return report

        working_dir = self.git_manager.working_dir
        for file_path in file_paths:
            print(f"Updating TOC: {file_path}")
            self.toc_runner.update(file_path, cwd=working_dir)
            report.processed.append(file_path)

            self.git_manager.stage_file(file_path)
            report.staged.append(file_path)

        print(f"Updated TOC in {len(report.staged)} file(s)")
        return report
