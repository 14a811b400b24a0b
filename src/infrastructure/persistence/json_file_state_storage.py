"""
Infrastructure adapter: single named JSON file → IStateStorage.

The file plays the role browser localStorage plays for a web client: one
snapshot, {"state": {...}, "version": 0}, overwritten wholesale on every save.
A missing or unreadable file reads as "nothing stored".
"""

import json
import logging
import os
from dataclasses import asdict
from typing import Optional

from src.domain.entities.app_state import PersistedState, WatchlistItem
from src.domain.ports.state_storage_port import IStateStorage

logger = logging.getLogger(__name__)

STORAGE_VERSION = 0


class JsonFileStateStorage(IStateStorage):
    def __init__(self, path: str = "runnr-storage.json") -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> Optional[PersistedState]:
        if not os.path.exists(self._path):
            return None
        try:
            with open(self._path, encoding="utf-8") as fh:
                raw = json.load(fh)
            state = raw["state"]
            return PersistedState(
                watchlist=tuple(
                    WatchlistItem(symbol=item["symbol"], name=item.get("name", ""))
                    for item in state.get("watchlist", [])
                ),
                symbol=state["symbol"],
                timeframe=state["timeframe"],
            )
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("Ignoring unreadable state file %s: %s", self._path, exc)
            return None

    def save(self, snapshot: PersistedState) -> None:
        payload = {"state": asdict(snapshot), "version": STORAGE_VERSION}
        directory = os.path.dirname(self._path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self._path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2)
        os.replace(tmp_path, self._path)
