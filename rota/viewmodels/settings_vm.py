from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from ..domain.animation import AnimationPolicy
from ..domain.transformations import ValueRange
from ..utils.logging import env_requests_debug


class OffsetRangePolicy(Enum):
    """Offset slider interval: wide (preferred) or narrow."""

    WIDE = "wide"
    NARROW = "narrow"

    @property
    def value_range(self) -> ValueRange:
        bound = 2000.0 if self is OffsetRangePolicy.WIDE else 200.0
        return ValueRange(-bound, bound)


@dataclass
class DisplayConfig:
    """Typed display settings that persist via StorageLocal."""

    offset_range: str = OffsetRangePolicy.WIDE.value
    animation_policy: str = AnimationPolicy.DEFAULT_AWARE.value
    tween_duration_ms: int = 500
    status_tint_ms: int = 1000
    frame_interval_ms: int = 16
    status_tint: bool = True


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps display settings state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[DisplayConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or DisplayConfig()
        self.on_save = on_save
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------
    @property
    def offset_policy(self) -> OffsetRangePolicy:
        return OffsetRangePolicy(self.config.offset_range)

    @property
    def animation_policy(self) -> AnimationPolicy:
        return AnimationPolicy(self.config.animation_policy)

    @property
    def frame_interval_ms(self) -> int:
        return self.config.frame_interval_ms

    @property
    def tween_duration_ms(self) -> int:
        return self.config.tween_duration_ms

    @property
    def status_tint_ms(self) -> int:
        return self.config.status_tint_ms

    @property
    def status_tint(self) -> bool:
        return self.config.status_tint

    # ------------------------------------------------------------------
    def set_offset_range(self, value: Any) -> None:
        self.config = replace(self.config, offset_range=self._coerce_choice("offset_range", value))

    def set_animation_policy(self, value: Any) -> None:
        self.config = replace(
            self.config, animation_policy=self._coerce_choice("animation_policy", value)
        )

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_keys = {*DisplayConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in DisplayConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key in {"offset_range", "animation_policy"}:
            return self._coerce_choice(key, raw)
        if key in {"tween_duration_ms", "status_tint_ms"}:
            return self._coerce_int(key, raw, minimum=0)
        if key == "frame_interval_ms":
            return self._coerce_int(key, raw, minimum=1)
        if key == "status_tint":
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_choice(key: str, value: Any) -> str:
        choices = OffsetRangePolicy if key == "offset_range" else AnimationPolicy
        if isinstance(value, choices):
            return value.value
        text = str(value).strip().lower() if value is not None else ""
        allowed = [member.value for member in choices]
        if text not in allowed:
            raise ValueError(f"{key} must be one of: {', '.join(allowed)}.")
        return text

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, minimum: Optional[int] = None) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if minimum is not None and coerced < minimum:
            raise ValueError(f"{name} must be at least {minimum}.")
        return coerced
