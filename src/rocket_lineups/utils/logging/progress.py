# ABOUTME: Spinner progress for the page-by-page extraction run
# ABOUTME: Wraps Rich's Progress so the pipeline can report which guide page is being fetched

from typing import Any

from rich.progress import MofNCompleteColumn, Progress, SpinnerColumn, TextColumn


class PageProgressTracker:
    """Progress callback that updates a Rich spinner as pages are processed."""

    def __init__(self, progress: Progress, task_id: Any):
        self.progress = progress
        self.task_id = task_id

    def __call__(self, label: str, completed: int, total: int) -> None:
        description = f"✅ Built {label}" if completed >= total else f"🚀 Extracting {label}"
        self.progress.update(self.task_id, description=description, completed=completed, total=total)


def create_page_progress(
    console, initial_description: str = "🚀 Preparing invasion extraction..."
) -> tuple[Progress, PageProgressTracker]:
    """Create a spinner progress display for the extraction run.

    Args:
        console: Rich console instance
        initial_description: Initial progress description

    Returns:
        Tuple of (progress, tracker)
    """
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    )

    task_id = progress.add_task(initial_description, total=None)
    return progress, PageProgressTracker(progress, task_id)
