"""
Progress reporting protocol for decoupling UI from classification.

`core.classification.classify_files` reports its progress through the
`ProgressDisplay` protocol so the same code drives a Rich progress bar in the
CLI and does nothing at all in tests.
"""

from types import TracebackType
from typing import Protocol

from rich.progress import Progress, TaskID
from ui.progress import complete_task, create_progress, create_task


class ProgressDisplay(Protocol):
    """
    Protocol for progress reporting.

    The lifecycle is: enter the context, call on_start() once, on_update()
    any number of times, on_complete() once, then exit the context.
    """

    def __enter__(self) -> "ProgressDisplay":
        """Enter the progress context."""

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the progress context."""

    def on_start(self, description: str, total: int | None) -> None:
        """Begin a task of `total` items (None for indeterminate)."""

    def on_update(self, *, advance: int) -> None:
        """Advance the task by `advance` items."""

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        """Mark the task as complete with its final description."""


class RichProgressDisplay:
    """ProgressDisplay rendered as a Rich progress bar."""

    def __init__(self) -> None:
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress()
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._progress:
            self._progress.__exit__(exc_type, exc_val, exc_tb)

    def on_start(self, description: str, total: int | None) -> None:
        """
        Create the Rich task.

        Raises:
            RuntimeError: If not used as a context manager.
        """
        self._task = create_task(self._require_progress(), description, total=total)

    def on_update(self, *, advance: int) -> None:
        """
        Advance the Rich task.

        Raises:
            RuntimeError: If not used as a context manager, or if on_start()
                was not called first.
            ValueError: If `advance` is not a positive number.
        """
        progress = self._require_progress()
        if self._task is None:
            raise RuntimeError("on_start() must be called before on_update()")
        if advance <= 0:
            raise ValueError("on_update() needs a positive 'advance'")

        progress.update(self._task, advance=advance)

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        """
        Show the final description and completed count.

        Raises:
            RuntimeError: If not used as a context manager, or if on_start()
                was not called first.
        """
        progress = self._require_progress()
        if self._task is None:
            raise RuntimeError("on_start() must be called before on_complete()")

        complete_task(progress, self._task, description, completed, total=total)

    def _require_progress(self) -> Progress:
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        return self._progress


class NoOpProgressDisplay:
    """ProgressDisplay that does nothing, for tests and quiet output modes."""

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        pass

    def on_start(self, description: str, total: int | None) -> None:
        pass

    def on_update(self, *, advance: int) -> None:
        pass

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        pass
