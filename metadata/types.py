"""Song record types shared by the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict


class SavedEdit(TypedDict, total=False):
    """Edit record as stored locally and exchanged with the shared store."""

    track: str | None
    artist: str | None
    album: str | None
    albumArtist: str | None


# Wire key -> processed field name.
SAVED_EDIT_FIELDS = {
    "track": "track",
    "artist": "artist",
    "album": "album",
    "albumArtist": "album_artist",
}


@dataclass
class SongFlags:
    is_corrected_by_user: bool = False


@dataclass
class Song:
    """Song observed by a connector.

    ``parsed`` holds what the connector scraped and is never modified by the
    pipeline. Stages write into ``processed``.
    """

    BASE_FIELDS = ("track", "album", "artist", "album_artist")

    connector_label: str
    unique_id: str | None = None
    parsed: dict[str, str | None] = field(default_factory=dict)
    processed: dict[str, str | None] = field(default_factory=dict)
    flags: SongFlags = field(default_factory=SongFlags)

    def __post_init__(self) -> None:
        self.parsed = dict(self.parsed)
        self.processed = dict(self.processed)
        for name in self.BASE_FIELDS:
            self.parsed.setdefault(name, None)
            self.processed.setdefault(name, None)

    def get_unique_id(self) -> str | None:
        value = (self.unique_id or "").strip()
        return value or None

    def get_field(self, name: str) -> str | None:
        return self.processed.get(name) or self.parsed.get(name)

    def to_saved_edit(self) -> SavedEdit:
        return {wire_key: self.get_field(name) for wire_key, name in SAVED_EDIT_FIELDS.items()}

    def __repr__(self) -> str:
        return (
            "Song("
            f"connector={self.connector_label!r}, unique_id={self.unique_id!r}, "
            f"artist={self.get_field('artist')!r}, track={self.get_field('track')!r}, "
            f"album={self.get_field('album')!r}, "
            f"corrected={self.flags.is_corrected_by_user!r})"
        )


__all__ = ["SAVED_EDIT_FIELDS", "SavedEdit", "Song", "SongFlags"]
