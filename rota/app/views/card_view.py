"""Canvas that draws both cards with their animated transforms.

Cards share one anchor at the top center of the canvas; the black card is
drawn underneath the blue one. Clicking a card reports its ``Selection``.
"""

from __future__ import annotations

import tkinter as tk
from typing import Callable, Dict, Mapping, Optional

from ...domain.projection import CARD_SIZE_PX, project_card
from ...domain.transformations import Selection, Transformations
from .theme import SURFACE
from .view_utils import safe_call


class CardCanvasView(tk.Canvas):
    """Two transformed cards on a white canvas."""

    OnSelect = Optional[Callable[[Selection], None]]

    # bottom to top
    DRAW_ORDER = (Selection.BLACK, Selection.BLUE)

    def __init__(
        self,
        parent: tk.Widget,
        *,
        colors: Mapping[Selection, str],
        on_select: OnSelect = None,
        width: int = 420,
        height: int = 260,
    ) -> None:
        super().__init__(parent, width=width, height=height, bg=SURFACE, highlightthickness=0)
        self._colors = dict(colors)
        self._on_select = on_select
        self._items: Dict[Selection, int] = {}
        self._last: Dict[Selection, Transformations] = {}

        for which in self.DRAW_ORDER:
            item = self.create_polygon(0, 0, 0, 0, 0, 0, fill=self._colors[which], outline="")
            self.tag_bind(item, "<Button-1>", lambda _e, w=which: safe_call(self._on_select, w))
            self._items[which] = item

        self.bind("<Configure>", lambda _e: self._redraw())
        self.render({which: Transformations() for which in Selection})

    def anchor(self) -> tuple:
        width = max(int(self.winfo_width()), int(self["width"]))
        return width / 2.0, 20.0 + CARD_SIZE_PX / 2.0

    def render(self, frame: Mapping[Selection, Transformations]) -> None:
        """Redraw the cards for one animation frame."""
        self._last.update(frame)
        self._redraw()

    def _redraw(self) -> None:
        center = self.anchor()
        for which in self.DRAW_ORDER:
            transform = self._last.get(which)
            if transform is None:
                continue
            points = project_card(transform, center)
            flat = [coord for point in points for coord in point]
            self.coords(self._items[which], *flat)
        self.tag_raise(self._items[Selection.BLUE])
