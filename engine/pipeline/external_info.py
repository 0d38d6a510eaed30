"""Pipeline stage loading song info contributed to the shared saved edits library.

To protect privacy the video is first checked anonymously against the range
index; the actual record is requested only when the index knows it.
"""

from __future__ import annotations

import logging

from app.shared_edits import SharedSavedEdits, get_shared_saved_edits
from metadata.merge import apply_saved_edit
from metadata.types import SavedEdit, Song

logger = logging.getLogger(__name__)


def lookup_song_info(song: Song, store: SharedSavedEdits) -> SavedEdit | None:
    """Return the shared record for ``song``; errors propagate.

    ``None`` means the song is not eligible or the index does not know it.
    """
    return store.get(song)


def process(song: Song, *, store: SharedSavedEdits | None = None) -> None:
    try:
        song_info = lookup_song_info(song, store or get_shared_saved_edits())
    except Exception as exc:
        logger.debug("Failed to apply external info for %s: %s", song.get_unique_id(), exc)
        return
    if song_info is None:
        return

    apply_saved_edit(song, song_info, source="shared_saved_edits")
    song.flags.is_corrected_by_user = True
