import threading

from app.shared_edits.anonymity import AnonymityQueryEngine
from app.shared_edits.client import MetadataApiClient
from app.shared_edits.digest import sha1_hex_digest
from app.shared_edits.errors import NetworkError, ProtocolError, RejectedError, SharedEditsError
from app.shared_edits.prefix import PrefixLengthCache
from app.shared_edits.store import SharedSavedEdits

_STORE: SharedSavedEdits | None = None
_STORE_LOCK = threading.Lock()


def get_shared_saved_edits() -> SharedSavedEdits:
    global _STORE
    if _STORE is not None:
        return _STORE
    with _STORE_LOCK:
        if _STORE is None:
            _STORE = SharedSavedEdits(MetadataApiClient())
    return _STORE


__all__ = [
    "AnonymityQueryEngine",
    "MetadataApiClient",
    "NetworkError",
    "PrefixLengthCache",
    "ProtocolError",
    "RejectedError",
    "SharedEditsError",
    "SharedSavedEdits",
    "get_shared_saved_edits",
    "sha1_hex_digest",
]
