from __future__ import annotations

import json
import logging
import os
from typing import Dict, Optional

from rota.domain.ports import StoragePort

PREFS_FILENAME = "user_prefs.json"
PREFS_DIR_ENV = "ROTA_PREFS_DIR"


class StorageLocal(StoragePort):
    """Local filesystem storage for display preferences (JSON)."""

    def __init__(self, root_dir: Optional[str] = None) -> None:
        self.root = root_dir or os.getenv(PREFS_DIR_ENV) or "."
        self._log = logging.getLogger(__name__)

    @property
    def prefs_path(self) -> str:
        return os.path.join(self.root, PREFS_FILENAME)

    def save_user_prefs(self, prefs: Dict) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self.prefs_path, "w", encoding="utf-8") as f:
            json.dump(prefs, f, ensure_ascii=False, indent=2, sort_keys=True)
        self._log.debug("Saved preferences to %s", self.prefs_path)

    def load_user_prefs(self) -> Dict:
        """Return stored preferences, ``{}`` when no file exists yet.

        Malformed JSON or a non-object document raises ``ValueError``.
        """
        path = self.prefs_path
        if not os.path.exists(path):
            return {}
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"{path} must contain a JSON object.")
        return payload
