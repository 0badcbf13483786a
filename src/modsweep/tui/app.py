"""Selection application for modsweep."""

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, SelectionList, Static

from modsweep.models import Candidate
from modsweep.tui.widgets import SelectionSummary


class SelectionApp(App[list[str]]):
    """Pick which directories to remove."""

    TITLE = "modsweep"
    SUB_TITLE = "Reclaim space from node_modules"

    BINDINGS = [
        Binding("enter", "confirm", "Remove selected", priority=True),
        Binding("a", "select_all", "Select All"),
        Binding("u", "deselect_all", "Deselect All"),
        Binding("escape", "cancel", "Cancel"),
        Binding("q", "cancel", "Quit", show=False),
    ]

    def __init__(
        self,
        candidates: list[Candidate],
        default_selected: bool = True,
        title: str = "Select node_modules directories to remove:",
    ):
        super().__init__()
        self.candidates = candidates
        self.default_selected = default_selected
        self.prompt = title
        self._sizes = {c.path: c.size_mb for c in candidates}

    def compose(self) -> ComposeResult:
        yield Header()

        with Vertical(id="selection-container"):
            yield Static(f"[bold]{self.prompt}[/bold]", id="selection-title")
            yield SelectionList[str](
                *[(escape(c.label), c.path, self.default_selected) for c in self.candidates],
                id="candidate-list",
            )
            yield SelectionSummary(total_count=len(self.candidates), id="selection-info")

        yield Footer()

    def on_mount(self) -> None:
        """Focus the list and show the initial selection."""
        self.query_one("#candidate-list", SelectionList).focus()
        self._update_selection_info()

    def on_selection_list_selected_changed(self, event: SelectionList.SelectedChanged) -> None:
        self._update_selection_info()

    def _update_selection_info(self) -> None:
        selected = self.query_one("#candidate-list", SelectionList).selected
        summary = self.query_one("#selection-info", SelectionSummary)
        summary.update_selection(len(selected), sum(self._sizes[p] for p in selected))

    def action_select_all(self) -> None:
        self.query_one("#candidate-list", SelectionList).select_all()

    def action_deselect_all(self) -> None:
        self.query_one("#candidate-list", SelectionList).deselect_all()

    def action_confirm(self) -> None:
        """Finish with the current selection."""
        self.exit(list(self.query_one("#candidate-list", SelectionList).selected))

    def action_cancel(self) -> None:
        """Finish without selecting anything."""
        self.exit([])


class TextualSelector:
    """Selector that asks the operator through SelectionApp."""

    def select(self, candidates: list[Candidate], default_selected: bool) -> list[str]:
        app = SelectionApp(candidates, default_selected=default_selected)
        return app.run() or []
