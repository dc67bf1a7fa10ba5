"""
Slider panel
------------
One labeled ``ttk.Scale`` per transform field. Each row shows its title on the
left, the current value rounded to two decimals on the right and the range
control underneath. Drags report every intermediate value via ``on_change``.

This is a pure View (UI-only). Values are pushed in with ``show`` and edits
leave through callbacks; no transform logic lives here.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Iterable, Optional

from ...domain.formatting import format_value
from ...domain.transformations import Transformations, ValueRange
from ...viewmodels.home_vm import SliderSpec
from .view_utils import safe_call


class RotationSliderView(ttk.Frame):
    """Title, rounded value and a range control for a single field."""

    OnChange = Optional[Callable[[float], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        title: str,
        value_range: ValueRange,
        value: float = 0.0,
        on_change: OnChange = None,
    ) -> None:
        super().__init__(parent, style="Panel.TFrame")
        self._on_change = on_change
        self._syncing = False

        self.columnconfigure(0, weight=1)
        self._value_var = tk.StringVar(value=format_value(value))
        ttk.Label(self, text=title, style="Panel.TLabel").grid(
            row=0, column=0, sticky="w", pady=(8, 0)
        )
        ttk.Label(self, textvariable=self._value_var, style="Panel.TLabel").grid(
            row=0, column=1, sticky="e", pady=(8, 0)
        )
        self.scale = ttk.Scale(
            self,
            orient="horizontal",
            style="Card.Horizontal.TScale",
            command=self._on_scale,
        )
        self.scale.grid(row=1, column=0, columnspan=2, sticky="ew")
        self.set_range(value_range)
        self.set_value(value)

    def set_range(self, value_range: ValueRange) -> None:
        self._syncing = True
        try:
            self.scale.configure(from_=value_range.minimum, to=value_range.maximum)
        finally:
            self._syncing = False

    def set_value(self, value: float) -> None:
        """Move the thumb without reporting a change."""
        self._syncing = True
        try:
            self.scale.set(value)
        finally:
            self._syncing = False
        self._value_var.set(format_value(value))

    def _on_scale(self, raw: str) -> None:
        value = float(raw)
        self._value_var.set(format_value(value))
        if self._syncing:
            return
        safe_call(self._on_change, value)


class SliderPanelView(ttk.Frame):
    """Rounded gray panel stacking one RotationSliderView per field."""

    OnFieldChange = Optional[Callable[[str, float], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        specs: Iterable[SliderSpec],
        on_change: OnFieldChange = None,
    ) -> None:
        super().__init__(parent, style="Panel.TFrame", padding=16)
        self._on_change = on_change
        self._sliders: Dict[str, RotationSliderView] = {}
        self.columnconfigure(0, weight=1)

        for row, spec in enumerate(specs):
            slider = RotationSliderView(
                self,
                title=spec.title,
                value_range=spec.value_range,
                on_change=lambda value, name=spec.field: safe_call(self._on_change, name, value),
            )
            slider.grid(row=row, column=0, sticky="ew")
            self._sliders[spec.field] = slider

    def show(self, transform: Transformations) -> None:
        """Sync every slider to ``transform`` (the active card's record)."""
        for name, slider in self._sliders.items():
            slider.set_value(transform.value_of(name))

    def set_ranges(self, specs: Iterable[SliderSpec]) -> None:
        for spec in specs:
            slider = self._sliders.get(spec.field)
            if slider is not None:
                slider.set_range(spec.value_range)
