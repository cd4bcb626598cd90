"""Progress tracking utilities."""

from typing import Any, Protocol

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

from fetchit.cli.console import console as default_console


class ProgressReporter(Protocol):
    """What the downloader needs from a progress indicator."""

    def __enter__(self) -> "ProgressReporter": ...

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: Any
    ) -> None: ...

    def advance(self, n: int) -> None: ...

    def finish(self) -> None: ...


class ProgressTracker:
    """A context manager rendering download progress with Rich.

    With a known total the bar is determinate (fill, byte counts, ETA).
    With a total of 0 it is an indeterminate pulse with no ETA.
    """

    def __init__(
        self, description: str, total: int, console: Console | None = None
    ):
        """
        Initialize the progress tracker.

        Args:
            description: Description of the download
            total: Total size in bytes, 0 when unknown
            console: Console to render on
        """
        self.determinate = total > 0
        columns: list[ProgressColumn] = [
            SpinnerColumn(style="green"),
            TimeElapsedColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(complete_style="cyan", finished_style="blue"),
            DownloadColumn(),
        ]
        if self.determinate:
            columns.extend([TransferSpeedColumn(), TimeRemainingColumn()])

        self.progress = Progress(*columns, console=console or default_console)
        self.task = self.progress.add_task(
            description, total=total if self.determinate else None
        )

    def __enter__(self) -> "ProgressTracker":
        """Start the progress tracking."""
        self.progress.start()
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: Any
    ) -> None:
        """Stop the progress tracking."""
        self.progress.stop()

    def advance(self, n: int) -> None:
        """Advance the bar by n bytes."""
        self.progress.update(self.task, advance=n)

    def finish(self) -> None:
        """Mark the transfer complete."""
        if self.determinate:
            self.progress.refresh()
            return
        # An indeterminate bar only gets a bound once everything has arrived
        completed = self.progress.tasks[0].completed
        self.progress.update(self.task, total=completed, refresh=True)


class NullProgress:
    """Progress reporter that renders nothing, only counts bytes."""

    def __init__(self, total: int = 0):
        self.total = total
        self.completed = 0
        self.finished = False

    def __enter__(self) -> "NullProgress":
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: Any
    ) -> None:
        pass

    def advance(self, n: int) -> None:
        self.completed += n

    def finish(self) -> None:
        self.finished = True


def create_progress(total: int, description: str = "Downloading") -> ProgressTracker:
    """Build the Rich tracker for a transfer of the given size."""
    return ProgressTracker(description, total)
