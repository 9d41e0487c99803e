"""
Rich progress bar helpers.

Builds the progress bar shown while a repository listing is classified and
applies the color of the current `ProgressState` to task descriptions.
"""

from enum import StrEnum
from typing import Optional

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class ProgressState(StrEnum):
    """Progress bar states, valued by the Rich color used to render them."""

    IN_PROGRESS = "magenta"
    COMPLETE = "green"


def create_progress() -> Progress:
    """Create a transient Rich Progress with spinner, description, bar and M/N count."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
    )


def styled(description: str, state: ProgressState) -> str:
    """Wrap a description in the Rich markup of the given state."""
    return f"[{state}]{description}"


def create_task(progress: Progress, description: str, total: Optional[int]) -> TaskID:
    """Add an IN_PROGRESS task; a None total renders as an indeterminate bar."""
    return progress.add_task(styled(description, ProgressState.IN_PROGRESS), total=total)


def complete_task(
    progress: Progress,
    task: TaskID,
    description: str,
    completed: int,
    total: Optional[int] = None,
) -> None:
    """
    Mark a task as finished.

    Args:
        progress: The Rich Progress instance containing the task.
        task: The task to complete.
        description: Final description, rendered in the COMPLETE color.
        completed: Absolute number of completed items.
        total: New total for the task. If None the existing total is kept.
    """
    progress.update(
        task,
        total=total,
        completed=completed,
        description=styled(description, ProgressState.COMPLETE),
    )
