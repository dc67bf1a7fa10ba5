"""Shared visual theme for the rotation demo views.

The module centralizes colors and ttk style tokens so the card canvas, the
slider panel and the main window render consistently.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

CARD_BLUE = "#2457ff"
CARD_BLACK = "#000000"
SURFACE = "#ffffff"
PANEL = "#d3d3d3"
TEXT = "#404040"
TRACK_INACTIVE = "#808080"


def apply_theme(root: tk.Misc) -> None:
    """Apply the ttk + tk visual theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=SURFACE)

    style.configure(".", background=SURFACE, foreground=TEXT)
    style.configure("TFrame", background=SURFACE)
    style.configure("Panel.TFrame", background=PANEL)
    style.configure("TLabel", background=SURFACE, foreground=TEXT)
    style.configure("Panel.TLabel", background=PANEL, foreground=TEXT)
    style.configure("Status.TLabel", background=SURFACE, foreground=TRACK_INACTIVE)
    style.configure("TCombobox", fieldbackground=SURFACE)

    style.configure(
        "Card.Horizontal.TScale",
        background=SURFACE,
        troughcolor=TRACK_INACTIVE,
        bordercolor=PANEL,
        lightcolor=CARD_BLUE,
        darkcolor=CARD_BLUE,
    )
