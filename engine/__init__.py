from .pipeline import process_song

__all__ = ["process_song"]
