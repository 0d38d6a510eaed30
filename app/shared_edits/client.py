import logging
from typing import Any
from urllib.parse import quote, urljoin

import requests
from requests.adapters import HTTPAdapter

from app.shared_edits.errors import NetworkError
from config.settings import (
    SHARED_EDITS_BASE_URL,
    SHARED_EDITS_TIMEOUT_SECONDS,
    SHARED_EDITS_USER_AGENT,
)

logger = logging.getLogger(__name__)


class MetadataApiClient:
    """Thin transport over the shared edits host.

    Returns raw responses; status handling belongs to the callers. Transport
    errors and timeouts are raised as ``NetworkError`` and never retried.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or SHARED_EDITS_BASE_URL).rstrip("/") + "/"
        self.timeout_seconds = SHARED_EDITS_TIMEOUT_SECONDS if timeout_seconds is None else float(timeout_seconds)
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=0)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        self._session = session

    def url_for(self, endpoint: str) -> str:
        return urljoin(self.base_url, endpoint.lstrip("/"))

    def request(self, method: str, endpoint: str, *, json_body: Any = None) -> requests.Response:
        url = self.url_for(endpoint)
        kwargs: dict[str, Any] = {
            "headers": {"User-Agent": SHARED_EDITS_USER_AGENT},
            "timeout": self.timeout_seconds,
        }
        if json_body is not None:
            kwargs["json"] = json_body
        try:
            resp = self._session.request(method, url, **kwargs)
        except requests.Timeout as exc:
            logger.info("[SHARED_EDITS] request=%s %s status=timeout", method, endpoint)
            raise NetworkError(f"Timed out after {self.timeout_seconds}s: {method} {endpoint}") from exc
        except requests.RequestException as exc:
            logger.info("[SHARED_EDITS] request=%s %s status=error", method, endpoint)
            raise NetworkError(f"Request failed: {method} {endpoint}: {exc}") from exc
        logger.info("[SHARED_EDITS] request=%s %s status=%s", method, endpoint, resp.status_code)
        return resp

    def get(self, endpoint: str) -> requests.Response:
        return self.request("GET", endpoint)

    def post_json(self, endpoint: str, payload: Any) -> requests.Response:
        return self.request("POST", endpoint, json_body=payload)

    def close(self) -> None:
        self._session.close()


def video_endpoint(platform: str, identifier: str) -> str:
    # Dots are escaped too so an identifier can never form a dot segment.
    return f"/v1/{platform}-video/{quote(identifier, safe='').replace('.', '%2E')}"
