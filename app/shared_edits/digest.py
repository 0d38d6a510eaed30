import hashlib
import re

_TOKEN_SPLIT_RE = re.compile(r"[^0-9a-f]+")


def sha1_hex_digest(message: str) -> str:
    """Return the lowercase hex SHA-1 of ``message`` encoded as UTF-8.

    SHA-1 matches the digests stored in the remote range index.
    """
    return hashlib.sha1(message.encode("utf-8")).hexdigest()


def parse_candidates(body: str) -> set[str]:
    return {token for token in _TOKEN_SPLIT_RE.split((body or "").lower()) if token}
