# keybindings.py
#
# Description:
# This file defines the keybindings for the application.
# Keeping them in a separate file makes them easier to manage and customize.
#

from textual.binding import Binding

# Bindings that are active across all screens
APP_BINDINGS = [
    Binding("q", "quit", "Quit"),
    Binding("ctrl+c", "quit", "Quit", show=False),
]

# Bindings specific to the dashboard screen
DASHBOARD_BINDINGS = [
    Binding("a", "add", "Add"),
    Binding("d,delete,backspace", "delete", "Delete"),
    Binding("x", "toggle", "Toggle Done"),
    Binding("enter", "activate", "Toggle", show=False),
    Binding("tab", "switch_focus", "Switch Pane", priority=True),
    Binding("down,j", "cursor_down", "Cursor Down", show=False),
    Binding("up,k", "cursor_up", "Cursor Up", show=False),
    Binding("home,g", "cursor_first", "First", show=False),
    Binding("end,G", "cursor_last", "Last", show=False),
]

# Bindings for the modal prompts
CONFIRM_BINDINGS = [
    Binding("y", "confirm", "Yes"),
    Binding("n,escape", "decline", "No"),
]

INPUT_BINDINGS = [
    Binding("escape", "cancel", "Cancel", show=False),
]
