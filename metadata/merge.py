"""Apply saved edit records onto a song's processed fields."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from metadata.types import SAVED_EDIT_FIELDS, Song

_LOG = logging.getLogger(__name__)


def apply_saved_edit(song: Song, edit: Mapping[str, Any], *, source: str) -> list[str]:
    """Write every present value of ``edit`` into ``song.processed`` as stored.

    Missing or falsy values never overwrite what an earlier stage wrote.
    Returns the processed field names that were written.
    """
    applied: list[str] = []
    for wire_key, name in SAVED_EDIT_FIELDS.items():
        value = edit.get(wire_key)
        if not value:
            continue
        song.processed[name] = value
        applied.append(name)
        _LOG.debug("song_field_source field=%s source=%s", name, source)
    return applied
