from __future__ import annotations

from app.shared_edits import SharedSavedEdits
from engine.pipeline import external_info, user_input
from metadata.saved_edits import SavedEdits
from metadata.types import Song


def process_song(
    song: Song,
    *,
    store: SharedSavedEdits | None = None,
    saved_edits: SavedEdits | None = None,
) -> Song:
    """Run the edit stages in order: shared library first, then local edits."""
    external_info.process(song, store=store)
    user_input.process(song, saved_edits=saved_edits)
    return song


__all__ = ["external_info", "process_song", "user_input"]
