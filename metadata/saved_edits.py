"""Local saved edits: the user's own corrections, keyed by song unique id."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from config.settings import SAVED_EDITS_PATH
from metadata.merge import apply_saved_edit
from metadata.types import SAVED_EDIT_FIELDS, SavedEdit, Song

logger = logging.getLogger(__name__)


class SavedEdits:
    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path or SAVED_EDITS_PATH)
        self._lock = threading.Lock()
        self._data: dict[str, SavedEdit] = {}
        self._loaded = False

    def _load_locked(self) -> None:
        if self._loaded:
            return
        self._loaded = True
        if not self._path.exists():
            return
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Unreadable saved edits file %s; starting empty", self._path)
            return
        if isinstance(payload, dict):
            self._data = {str(k): v for k, v in payload.items() if isinstance(v, dict)}

    def _persist_locked(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(f"{self._path.suffix}.tmp")
        tmp_path.write_text(json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp_path.replace(self._path)

    def get(self, unique_id: str) -> SavedEdit | None:
        with self._lock:
            self._load_locked()
            edit = self._data.get(unique_id)
            return dict(edit) if edit is not None else None

    def save(self, unique_id: str, edit: SavedEdit | dict[str, Any]) -> None:
        cleaned = {key: edit.get(key) for key in SAVED_EDIT_FIELDS if key in edit}
        with self._lock:
            self._load_locked()
            self._data[unique_id] = cleaned
            self._persist_locked()

    def remove(self, unique_id: str) -> bool:
        with self._lock:
            self._load_locked()
            if self._data.pop(unique_id, None) is None:
                return False
            self._persist_locked()
            return True

    def save_song_info(self, song: Song, edit: SavedEdit) -> bool:
        unique_id = song.get_unique_id()
        if not unique_id:
            return False
        self.save(unique_id, edit)
        return True

    def load_song_info(self, song: Song) -> bool:
        """Apply the stored edit for ``song``; return whether one existed."""
        unique_id = song.get_unique_id()
        if not unique_id:
            return False
        edit = self.get(unique_id)
        if edit is None:
            return False
        apply_saved_edit(song, edit, source="saved_edits")
        return True


_SAVED_EDITS: SavedEdits | None = None
_SAVED_EDITS_LOCK = threading.Lock()


def get_saved_edits() -> SavedEdits:
    global _SAVED_EDITS
    if _SAVED_EDITS is not None:
        return _SAVED_EDITS
    with _SAVED_EDITS_LOCK:
        if _SAVED_EDITS is None:
            _SAVED_EDITS = SavedEdits()
    return _SAVED_EDITS
