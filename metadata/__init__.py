from .types import SAVED_EDIT_FIELDS, SavedEdit, Song, SongFlags

__all__ = ["SAVED_EDIT_FIELDS", "SavedEdit", "Song", "SongFlags"]
