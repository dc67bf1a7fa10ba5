from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..domain.transformations import (
    OFFSET_FIELDS,
    ROTATION_FIELDS,
    SCALE_FIELDS,
    TRANSFORM_FIELDS,
    Selection,
    Transformations,
    ValueRange,
)
from ..domain.errors import UnknownFieldError
from .settings_vm import OffsetRangePolicy

ROTATION_RANGE = ValueRange(-300.0, 300.0)
SCALE_RANGE = ValueRange(0.0, 2.0)

SLIDER_TITLES: Dict[str, str] = {
    "x_axis_rotation": "X axis rotate",
    "y_axis_rotation": "Y axis rotate",
    "z_axis_rotation": "Z axis rotate",
    "x_scale": "X scale",
    "y_scale": "Y scale",
    "x_offset": "X offset",
    "y_offset": "Y offset",
}


@dataclass(frozen=True)
class SliderSpec:
    """One slider row: which field it edits, its label and its interval."""

    field: str
    title: str
    value_range: ValueRange


class HomeVM:
    """Owns both card transforms and the selection. Pure UI-logic.

    Responsibilities
    - Expose the active transform (the selected card's record)
    - Route slider edits to the selected card only, clamped to the slider range
    - Reset a card to the identity record when it gets selected
    - Notify the view layer after every state change
    """

    def __init__(
        self,
        *,
        offset_policy: OffsetRangePolicy = OffsetRangePolicy.WIDE,
        on_changed: Optional[Callable[["HomeVM"], None]] = None,
        on_selection_changed: Optional[Callable[[Selection], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.on_changed = on_changed
        self.on_selection_changed = on_selection_changed
        self._selected = Selection.BLUE
        self._transforms: Dict[Selection, Transformations] = {
            Selection.BLUE: Transformations(),
            Selection.BLACK: Transformations(),
        }
        self._offset_policy = offset_policy

    # ---- State (read-only for views) ----
    @property
    def selected(self) -> Selection:
        return self._selected

    @property
    def blue(self) -> Transformations:
        return self._transforms[Selection.BLUE]

    @property
    def black(self) -> Transformations:
        return self._transforms[Selection.BLACK]

    @property
    def active_transform(self) -> Transformations:
        return self._transforms[self._selected]

    @property
    def offset_policy(self) -> OffsetRangePolicy:
        return self._offset_policy

    def transform_for(self, which: Selection) -> Transformations:
        return self._transforms[which]

    # ---- Slider configuration ----
    def range_for(self, field_name: str) -> ValueRange:
        if field_name in ROTATION_FIELDS:
            return ROTATION_RANGE
        if field_name in SCALE_FIELDS:
            return SCALE_RANGE
        if field_name in OFFSET_FIELDS:
            return self._offset_policy.value_range
        raise UnknownFieldError(field_name)

    def slider_specs(self) -> List[SliderSpec]:
        return [
            SliderSpec(field=name, title=SLIDER_TITLES[name], value_range=self.range_for(name))
            for name in TRANSFORM_FIELDS
        ]

    def set_offset_range(self, policy: OffsetRangePolicy) -> None:
        """Switch the offset interval and clamp both records into it."""
        if policy is self._offset_policy:
            return
        self._offset_policy = policy
        bounds = policy.value_range
        for which, record in self._transforms.items():
            for name in OFFSET_FIELDS:
                record = record.with_field(name, bounds.clamp(record.value_of(name)))
            self._transforms[which] = record
        self._log.info("Offset range set to %s %s", policy.value, bounds)
        self._notify()

    # ---- Commands surfaced to View ----
    def select_card(self, which: Selection) -> None:
        """Select ``which`` and reset its record to the identity default."""
        previous = self._selected
        self._selected = which
        self._transforms[which] = Transformations()
        if previous is not which:
            self._log.info("Selected %s card", which.value)
            if self.on_selection_changed:
                self.on_selection_changed(which)
        else:
            self._log.debug("Reset %s card", which.value)
        self._notify()

    def update_field(self, field_name: str, value: float) -> None:
        """Write ``value`` into ``field_name`` of the selected card."""
        clamped = self.range_for(field_name).clamp(value)
        current = self._transforms[self._selected]
        if current.value_of(field_name) == clamped:
            return
        self._transforms[self._selected] = current.with_field(field_name, clamped)
        self._log.debug("%s.%s = %.3f", self._selected.value, field_name, clamped)
        self._notify()

    # ---- Helpers ----
    def _notify(self) -> None:
        if self.on_changed:
            self.on_changed(self)
