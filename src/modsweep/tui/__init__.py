"""Interactive selection for modsweep."""

from modsweep.tui.app import SelectionApp, TextualSelector

__all__ = ["SelectionApp", "TextualSelector"]
