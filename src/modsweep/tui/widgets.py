"""Custom widgets for the modsweep selection screen."""

from textual.reactive import reactive
from textual.widgets import Static


class SelectionSummary(Static):
    """How many directories are selected and how much they hold."""

    selected_count: reactive[int] = reactive(0)
    selected_mb: reactive[int] = reactive(0)

    def __init__(self, total_count: int = 0, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.total_count = total_count

    def update_selection(self, count: int, size_mb: int) -> None:
        """Update with the current selection."""
        self.selected_count = count
        self.selected_mb = size_mb

    def render(self) -> str:
        if not self.selected_count:
            return "[dim]No directories selected[/dim]"
        return (
            f"[bold]{self.selected_count}[/bold] of {self.total_count} selected, "
            f"[bold green]{self.selected_mb}MB[/bold green] to free"
        )
