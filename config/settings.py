"""Application settings constants."""

from __future__ import annotations

import os

# Host serving the shared saved edits index and records.
SHARED_EDITS_BASE_URL = os.getenv("SHARED_EDITS_BASE_URL", "https://music-metadata.lostluma.net")
SHARED_EDITS_USER_AGENT = os.getenv(
    "SHARED_EDITS_USER_AGENT",
    "SharedEdits/1.0 (+https://github.com/web-scrobbler/web-scrobbler)",
)
SHARED_EDITS_TIMEOUT_SECONDS = float(os.getenv("SHARED_EDITS_TIMEOUT_SECONDS", "10"))

# Range queries per lookup, counting the retry after a prefix length rejection.
# At least 2, so one rejected prefix length is always retried.
SHARED_EDITS_MAX_ATTEMPTS = max(2, int(os.getenv("SHARED_EDITS_MAX_ATTEMPTS", "2")))

# Only songs from connectors whose label contains this platform are looked up.
SHARED_EDITS_PLATFORM = os.getenv("SHARED_EDITS_PLATFORM", "youtube").strip().lower()

# Local (per-user) saved edits file.
SAVED_EDITS_PATH = os.getenv("SAVED_EDITS_PATH") or ".cache/saved_edits.json"
