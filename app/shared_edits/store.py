import json
import logging
from typing import Any

from app.shared_edits.anonymity import AnonymityQueryEngine
from app.shared_edits.client import MetadataApiClient, video_endpoint
from app.shared_edits.errors import RejectedError
from config.settings import SHARED_EDITS_PLATFORM
from metadata.types import SavedEdit, Song

logger = logging.getLogger(__name__)


class SharedSavedEdits:
    """Read/write access to edits other users contributed for a video.

    A record is only requested by its full identifier after the anonymity
    check reported that the index knows it.
    """

    def __init__(
        self,
        client: MetadataApiClient,
        engine: AnonymityQueryEngine | None = None,
        *,
        platform: str | None = None,
    ) -> None:
        self.client = client
        self.engine = engine or AnonymityQueryEngine(client)
        self.platform = (platform or SHARED_EDITS_PLATFORM).strip().lower()

    def is_eligible(self, song: Song) -> bool:
        if not song.get_unique_id():
            return False
        return self.platform in (song.connector_label or "").lower()

    def is_known(self, identifier: str) -> bool:
        return self.engine.is_known(identifier)

    def fetch_record(self, identifier: str) -> SavedEdit | None:
        if not self.engine.is_known(identifier):
            return None
        resp = self.client.get(video_endpoint(self.platform, identifier))
        if not resp.ok:
            raise RejectedError(
                f"Record fetch for {identifier} failed ({resp.status_code})",
                status_code=resp.status_code,
            )
        try:
            payload = resp.json()
        except ValueError as exc:
            raise RejectedError(f"Record for {identifier} is not valid JSON", status_code=resp.status_code) from exc
        if not isinstance(payload, dict):
            raise RejectedError(f"Record for {identifier} is not a JSON object", status_code=resp.status_code)
        return payload

    def put_record(self, identifier: str, record: SavedEdit | dict[str, Any]) -> bool:
        resp = self.client.post_json(video_endpoint(self.platform, identifier), dict(record))
        if not resp.ok:
            logger.warning(
                "[SHARED_EDITS] submission rejected id=%s status=%s",
                identifier,
                resp.status_code,
            )
        return bool(resp.ok)

    def get(self, song: Song) -> SavedEdit | None:
        if not self.is_eligible(song):
            return None
        unique_id = song.get_unique_id()
        edit = self.fetch_record(unique_id)
        if edit is not None:
            logger.debug("Loaded shared saved edit %s: %s", unique_id, json.dumps(edit, ensure_ascii=False))
        return edit

    def put(self, song: Song, edit: SavedEdit) -> bool:
        if not self.is_eligible(song):
            return False
        return self.put_record(song.get_unique_id(), edit)
