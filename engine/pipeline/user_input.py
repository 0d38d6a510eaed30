"""Pipeline stage applying the user's own saved edits."""

from __future__ import annotations

import logging

from metadata.saved_edits import SavedEdits, get_saved_edits
from metadata.types import Song

logger = logging.getLogger(__name__)


def process(song: Song, *, saved_edits: SavedEdits | None = None) -> None:
    is_song_info_loaded = False
    try:
        is_song_info_loaded = (saved_edits or get_saved_edits()).load_song_info(song)
    except Exception:
        logger.exception("Failed to load saved edit for %s", song.get_unique_id())

    # May already be set by the external info stage.
    if not song.flags.is_corrected_by_user:
        song.flags.is_corrected_by_user = is_song_info_loaded
