# rota/app/main.py
from __future__ import annotations

import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.card_view import CardCanvasView
from .views.slider_panel_view import SliderPanelView
from .views.theme import CARD_BLACK, CARD_BLUE

# ---- ViewModels & presenter ----
from ..viewmodels.home_vm import HomeVM
from ..viewmodels.settings_vm import OffsetRangePolicy, SettingsVM
from .animation_presenter import AnimationPresenter
from .frame_scheduler import FrameScheduler

# ---- Domain & adapters ----
from ..domain.animation import AnimationPolicy
from ..domain.transformations import Selection
from ..adapters.storage_local import StorageLocal
from ..utils import logging as logging_utils

logging_utils.configure_root()

CARD_COLORS = {Selection.BLUE: CARD_BLUE, Selection.BLACK: CARD_BLACK}


class App:
    """Bootstrap: wire Views <-> ViewModels, animation presenter and settings storage."""

    def __init__(self, storage: Optional[StorageLocal] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.storage = storage or StorageLocal()

        # ---- Settings first: they shape slider ranges and animation specs ----
        self.settings_vm = SettingsVM(on_save=self.storage.save_user_prefs)
        load_error = self._load_settings()
        logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)

        self.home_vm = HomeVM(
            offset_policy=self.settings_vm.offset_policy,
            on_selection_changed=self._on_selection_changed,
        )

        # ---- Views (constructor callbacks; no .configure(...)) ----
        self.win = MainWindowView(
            offset_choices=[policy.value for policy in OffsetRangePolicy],
            animation_choices=[policy.value for policy in AnimationPolicy],
            on_offset_range_changed=self._on_offset_range_changed,
            on_animation_policy_changed=self._on_animation_policy_changed,
            on_close=self._on_close,
        )
        self.win.set_choices(
            offset_range=self.settings_vm.offset_policy.value,
            animation_policy=self.settings_vm.animation_policy.value,
        )

        self.cards = CardCanvasView(
            self.win.card_host,
            colors=CARD_COLORS,
            on_select=self.home_vm.select_card,
        )
        self.win.mount_cards(self.cards)

        self.sliders = SliderPanelView(
            self.win.slider_host,
            specs=self.home_vm.slider_specs(),
            on_change=self.home_vm.update_field,
        )
        self.win.mount_sliders(self.sliders)

        # ---- Animation loop on Tk's after() ----
        self.presenter = AnimationPresenter(
            scheduler=FrameScheduler(
                self.win.after,
                self.win.after_cancel,
                interval_ms=self.settings_vm.frame_interval_ms,
            ),
            render_cards=self.cards.render,
            render_status=self.win.set_status_color,
            card_colors=CARD_COLORS,
            policy=self.settings_vm.animation_policy,
        )
        self._apply_animation_settings()

        self.home_vm.on_changed = self._on_home_changed
        self._on_home_changed(self.home_vm)

        if load_error:
            self.win.show_status(load_error)

    # ------------------------------------------------------------------
    # HomeVM -> views
    # ------------------------------------------------------------------
    def _on_home_changed(self, vm: HomeVM) -> None:
        self.sliders.show(vm.active_transform)
        self.presenter.sync(vm)

    def _on_selection_changed(self, which: Selection) -> None:
        self.win.show_status(f"{which.value.title()} card selected")

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _on_offset_range_changed(self, choice: str) -> None:
        try:
            self.settings_vm.set_offset_range(choice)
        except ValueError as exc:
            self._log.warning("Rejected offset range %r: %s", choice, exc)
            self.win.show_status(str(exc))
            return
        self.home_vm.set_offset_range(self.settings_vm.offset_policy)
        self.sliders.set_ranges(self.home_vm.slider_specs())
        self.sliders.show(self.home_vm.active_transform)
        self._save_settings()

    def _on_animation_policy_changed(self, choice: str) -> None:
        try:
            self.settings_vm.set_animation_policy(choice)
        except ValueError as exc:
            self._log.warning("Rejected animation policy %r: %s", choice, exc)
            self.win.show_status(str(exc))
            return
        self._log.info("Animation policy set to %s", self.settings_vm.animation_policy.value)
        self._apply_animation_settings()
        self._save_settings()

    def _apply_animation_settings(self) -> None:
        self.presenter.apply_settings(self.settings_vm)
        if not self.settings_vm.status_tint:
            self.win.hide_status_strip()

    # ------------------------------------------------------------------
    # Settings persistence
    # ------------------------------------------------------------------
    def _load_settings(self) -> Optional[str]:
        """Apply stored preferences; return a user-facing message on failure."""
        try:
            self.settings_vm.apply_dict(self.storage.load_user_prefs())
        except (OSError, ValueError) as exc:
            self._log.warning("Ignoring stored preferences: %s", exc)
            return f"Preferences ignored: {exc}"
        return None

    def _save_settings(self) -> None:
        try:
            self.settings_vm.cmd_save()
        except OSError as exc:
            self._log.warning("Could not save preferences: %s", exc)
            self.win.show_status(f"Could not save preferences: {exc}")

    def _on_close(self) -> None:
        self.presenter.close()


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
