"""Anonymous existence checks against the shared edits range index.

Only a truncated SHA-1 prefix of the identifier leaves the process. The index
answers with every known digest sharing that prefix and the membership test
happens locally.
"""

from __future__ import annotations

import logging

from app.shared_edits.client import MetadataApiClient
from app.shared_edits.digest import parse_candidates, sha1_hex_digest
from app.shared_edits.errors import ProtocolError
from app.shared_edits.prefix import PrefixLengthCache
from config.settings import SHARED_EDITS_MAX_ATTEMPTS

logger = logging.getLogger(__name__)

PREFIX_LENGTH_ENDPOINT = "/v1/prefix-length"
RANGE_ENDPOINT = "/v1/range/{prefix}"
INCORRECT_PREFIX_LENGTH_MESSAGE = "Incorrect prefix length requested."


class AnonymityQueryEngine:
    def __init__(
        self,
        client: MetadataApiClient,
        *,
        cache: PrefixLengthCache | None = None,
        max_attempts: int | None = None,
    ) -> None:
        self.client = client
        self.cache = cache or PrefixLengthCache(self.fetch_prefix_length)
        attempts = SHARED_EDITS_MAX_ATTEMPTS if max_attempts is None else int(max_attempts)
        self.max_attempts = max(2, attempts)

    def fetch_prefix_length(self) -> int:
        resp = self.client.get(PREFIX_LENGTH_ENDPOINT)
        if not resp.ok:
            raise ProtocolError(f"Prefix length request failed ({resp.status_code})")
        text = (resp.text or "").strip()
        try:
            return int(text)
        except ValueError as exc:
            raise ProtocolError(f"Prefix length response is not an integer: {text!r}") from exc

    def prefix_for(self, digest: str) -> str:
        return digest[: self.cache.get()]

    def is_known(self, identifier: str) -> bool:
        """Return whether the index holds ``identifier``, sending only a digest prefix."""
        digest = sha1_hex_digest(identifier)
        for attempt in range(1, self.max_attempts + 1):
            prefix = self.prefix_for(digest)
            resp = self.client.get(RANGE_ENDPOINT.format(prefix=prefix))
            body = resp.text or ""
            if resp.ok:
                return digest in parse_candidates(body)
            if resp.status_code == 400 and INCORRECT_PREFIX_LENGTH_MESSAGE in body:
                logger.info(
                    "[SHARED_EDITS] prefix length %s rejected attempt=%s/%s",
                    len(prefix),
                    attempt,
                    self.max_attempts,
                )
                self.cache.reset()
                continue
            raise ProtocolError(f"Unhandled range response ({resp.status_code})")
        raise ProtocolError(f"Prefix length still rejected after {self.max_attempts} attempts")
