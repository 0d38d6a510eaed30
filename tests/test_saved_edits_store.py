from __future__ import annotations

import json

from metadata.merge import apply_saved_edit
from metadata.saved_edits import SavedEdits
from metadata.types import Song


def test_saved_edits_persist_across_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "edits.json"
    first = SavedEdits(path)
    first.save("vid-1", {"track": "Song", "albumArtist": "Band", "ignored": "x"})

    second = SavedEdits(path)

    assert second.get("vid-1") == {"track": "Song", "albumArtist": "Band"}
    assert json.loads(path.read_text(encoding="utf-8")) == {"vid-1": {"track": "Song", "albumArtist": "Band"}}
    assert not path.with_suffix(".json.tmp").exists()


def test_saved_edits_remove(tmp_path) -> None:
    saved = SavedEdits(tmp_path / "edits.json")
    saved.save("vid-1", {"track": "Song"})

    assert saved.remove("vid-1") is True
    assert saved.remove("vid-1") is False
    assert SavedEdits(tmp_path / "edits.json").get("vid-1") is None


def test_saved_edits_unreadable_file_starts_empty(tmp_path) -> None:
    path = tmp_path / "edits.json"
    path.write_text("{not json", encoding="utf-8")

    assert SavedEdits(path).get("vid-1") is None


def test_save_and_load_song_info(tmp_path) -> None:
    saved = SavedEdits(tmp_path / "edits.json")
    song = Song(connector_label="YouTube", unique_id="vid-1", parsed={"artist": "Parsed"})

    assert saved.save_song_info(song, {"track": "Edited", "artist": None}) is True
    assert saved.load_song_info(song) is True
    assert song.processed["track"] == "Edited"
    assert song.processed["artist"] is None
    assert song.get_field("artist") == "Parsed"

    anonymous = Song(connector_label="YouTube")
    assert saved.save_song_info(anonymous, {"track": "Edited"}) is False
    assert saved.load_song_info(anonymous) is False


def test_apply_saved_edit_skips_only_falsy_values() -> None:
    song = Song(connector_label="YouTube", unique_id="vid-1", processed={"album": "Kept", "artist": "Kept Artist"})

    applied = apply_saved_edit(
        song,
        {"track": "  Song  ", "album": "", "artist": 0, "albumArtist": " "},
        source="test",
    )

    assert applied == ["track", "album_artist"]
    assert song.processed["track"] == "  Song  "
    assert song.processed["album_artist"] == " "
    assert song.processed["album"] == "Kept"
    assert song.processed["artist"] == "Kept Artist"


def test_song_copies_caller_field_dicts() -> None:
    parsed = {"track": "Parsed"}
    processed = {"album": "Processed"}

    song = Song(connector_label="YouTube", unique_id="vid-1", parsed=parsed, processed=processed)
    song.processed["track"] = "Changed"

    assert parsed == {"track": "Parsed"}
    assert processed == {"album": "Processed"}


def test_song_to_saved_edit_prefers_processed_fields() -> None:
    song = Song(
        connector_label="YouTube",
        unique_id="vid-1",
        parsed={"track": "Parsed", "artist": "Parsed Artist"},
        processed={"track": "Processed"},
    )

    assert song.to_saved_edit() == {
        "track": "Processed",
        "artist": "Parsed Artist",
        "album": None,
        "albumArtist": None,
    }
