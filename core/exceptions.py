"""
Custom exception classes for the file-info CLI.

The classifier itself never raises: unrecognized paths yield None. These
exceptions belong to the collaborators around it, mainly the git adapter that
lists a project's files. They carry structured diagnostic data so the CLI can
print a helpful report.
"""

import os
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """
    Base exception for git operation errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        root: The repository root the operation ran in, if known.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing diagnostic information including
            exception type, details, and OS name.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        root: Optional[Path] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "A git operation failed"
        super().__init__(self.message)
        self.root = root
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class NotAGitRepositoryError(GitError):
    """Raised when the scanned directory is not inside a git working tree."""

    def __init__(
        self,
        root: Optional[Path] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"Not a git repository: '{root}'",
            root=root,
            original_exception=original_exception,
        )


class GitCommandError(GitError):
    """
    Raised when a git command exits with a non-zero status.

    Attributes:
        cmd: The command that failed.
        returncode: Its exit status.
    """

    def __init__(
        self,
        cmd: list[str],
        returncode: int,
        root: Optional[Path] = None,
    ):
        self.cmd = cmd
        self.returncode = returncode
        super().__init__(
            message=f"'{' '.join(cmd)}' exited with status {returncode}",
            root=root,
        )
