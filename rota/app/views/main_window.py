"""
MainWindowView
---------------
Tkinter main window for the card rotation demo. This file contains **only
View code**: layout containers, a tinted status strip and a small settings
toolbar. All interactions leave through constructor callbacks.

Layout, top to bottom:
  * Status strip tinted with the selected card's color
  * Toolbar: offset range and animation policy
  * Card host (CardCanvasView is inserted later)
  * Slider host (SliderPanelView is inserted later)
  * Status line
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable, Optional

from .theme import CARD_BLUE, SURFACE, apply_theme
from .view_utils import safe_call


class MainWindowView(tk.Tk):
    """Top-level application window."""

    OnVoid = Optional[Callable[[], None]]
    OnChoice = Optional[Callable[[str], None]]

    def __init__(
        self,
        *,
        offset_choices: Iterable[str],
        animation_choices: Iterable[str],
        on_offset_range_changed: OnChoice = None,
        on_animation_policy_changed: OnChoice = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("Card Rotation")
        self.geometry("460x880")
        self.minsize(420, 720)
        apply_theme(self)

        self._on_offset_range_changed = on_offset_range_changed
        self._on_animation_policy_changed = on_animation_policy_changed
        self._on_close = on_close

        self.columnconfigure(0, weight=1)
        self.rowconfigure(3, weight=1)

        self.status_strip = tk.Frame(self, height=24, bg=CARD_BLUE)
        self.status_strip.grid(row=0, column=0, sticky="ew")

        self._build_toolbar(self, list(offset_choices), list(animation_choices))

        self.card_host = ttk.Frame(self)
        self.card_host.grid(row=2, column=0, sticky="ew", padx=10, pady=(20, 40))
        self.card_host.columnconfigure(0, weight=1)

        self.slider_host = ttk.Frame(self)
        self.slider_host.grid(row=3, column=0, sticky="nsew", padx=10, pady=(0, 10))
        self.slider_host.columnconfigure(0, weight=1)

        self._status_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self._status_var, style="Status.TLabel").grid(
            row=4, column=0, sticky="ew", padx=10, pady=(0, 6)
        )

        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget, offset_choices: list, animation_choices: list) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=1, column=0, sticky="ew", padx=10, pady=(8, 0))

        ttk.Label(toolbar, text="Offset range").pack(side="left")
        self.offset_var = tk.StringVar(value=offset_choices[0] if offset_choices else "")
        offset_combo = ttk.Combobox(
            toolbar, textvariable=self.offset_var, values=offset_choices, state="readonly", width=8
        )
        offset_combo.pack(side="left", padx=(6, 16))
        offset_combo.bind(
            "<<ComboboxSelected>>",
            lambda _e: safe_call(self._on_offset_range_changed, self.offset_var.get()),
        )

        ttk.Label(toolbar, text="Animation").pack(side="left")
        self.animation_var = tk.StringVar(value=animation_choices[0] if animation_choices else "")
        animation_combo = ttk.Combobox(
            toolbar, textvariable=self.animation_var, values=animation_choices, state="readonly", width=14
        )
        animation_combo.pack(side="left", padx=(6, 0))
        animation_combo.bind(
            "<<ComboboxSelected>>",
            lambda _e: safe_call(self._on_animation_policy_changed, self.animation_var.get()),
        )

    # ------------------------------------------------------------------
    # Mounting & setters
    # ------------------------------------------------------------------
    def mount_cards(self, view: tk.Widget) -> None:
        view.grid(row=0, column=0, sticky="ew")

    def mount_sliders(self, view: tk.Widget) -> None:
        view.grid(row=0, column=0, sticky="nsew")

    def set_status_color(self, color: str) -> None:
        self.status_strip.configure(bg=color)

    def hide_status_strip(self) -> None:
        self.status_strip.configure(bg=SURFACE)

    def set_choices(self, *, offset_range: str, animation_policy: str) -> None:
        self.offset_var.set(offset_range)
        self.animation_var.set(animation_policy)

    def show_status(self, message: str) -> None:
        self._status_var.set(message)

    def _handle_close(self) -> None:
        safe_call(self._on_close)
        self.destroy()
