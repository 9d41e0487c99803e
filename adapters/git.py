"""
Git repository adapter for listing project files.

The classifier works on project-relative paths only and never touches the
filesystem. This module produces those paths from a git working tree by
streaming `git ls-files`, so ignored build output (`dist/`, `node_modules/`)
never reaches the classifier. Entries are read NUL-separated so file
names are passed on exactly as they are on disk.
"""

from pathlib import Path
import subprocess
from typing import Generator

from core.exceptions import GitCommandError, NotAGitRepositoryError

READ_CHUNK_SIZE = 64 * 1024


class GitClient:
    """
    Client for listing the files of a git repository.

    Attributes:
        root: The root path of the git repository this client operates on.
        cmd: The `git ls-files` command used to enumerate tracked and
            untracked-but-not-ignored files.
    """

    def __init__(self, root: Path):
        self.root = root
        self.cmd = [
            "git",
            "ls-files",
            "-z",
            "--cached",
            "--others",
            "--exclude-standard",
        ]

    def is_repo(self) -> bool:
        """
        Check if the root path is inside a git working tree.

        Returns:
            bool: True if `git rev-parse --is-inside-work-tree` succeeds.
        """
        try:
            subprocess.run(
                ["git", "rev-parse", "--is-inside-work-tree"],
                cwd=self.root,
                text=True,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False

    def ensure_repo(self) -> None:
        """
        Raise if the root path is not a git repository.

        Raises:
            NotAGitRepositoryError: If `is_repo()` is False.
        """
        if not self.is_repo():
            raise NotAGitRepositoryError(self.root)

    def count_files(self) -> int:
        """
        Count the files `stream_file_paths` would yield, without keeping them.

        Used to size progress bars before classification starts. The listing
        is read twice, so a tree that changes in between can make the count
        differ from what is streamed afterwards.

        Raises:
            GitCommandError: If `git ls-files` exits with a non-zero status.
        """
        count = 0
        with self._create_subprocess(self.cmd) as process:
            for _ in self._read_paths(process):
                count += 1
            self._check_returncode(process)

        return count

    def stream_file_paths(self) -> Generator[str, None, None]:
        """
        Lazily yield the repository's file paths, relative to the root.

        `git ls-files -z` separates entries with NUL and never quotes them, so
        names with non-ASCII characters, spaces or quotes arrive verbatim and
        always use "/" as separator regardless of the platform.

        Yields:
            str: One project-relative path per file.

        Raises:
            GitCommandError: If `git ls-files` exits with a non-zero status.
        """
        with self._create_subprocess(self.cmd) as process:
            yield from self._read_paths(process)
            self._check_returncode(process)

    @staticmethod
    def _read_paths(process: subprocess.Popen[str]) -> Generator[str, None, None]:
        # Entries are NUL-terminated; empty entries are skipped
        if not process.stdout:
            return

        pending = ""
        for chunk in iter(lambda: process.stdout.read(READ_CHUNK_SIZE), ""):
            pending += chunk
            *entries, pending = pending.split("\0")
            yield from (entry for entry in entries if entry)

        if pending:
            yield pending

    def _check_returncode(self, process: subprocess.Popen[str]) -> None:
        returncode = process.wait()
        if returncode != 0:
            raise GitCommandError(self.cmd, returncode, root=self.root)

    def _create_subprocess(self, cmd: list[str]) -> subprocess.Popen[str]:
        return subprocess.Popen(
            cmd,
            cwd=self.root,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
        )
