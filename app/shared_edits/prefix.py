import threading
from typing import Callable

from app.shared_edits.errors import ProtocolError


class PrefixLengthCache:
    """Server-advertised digest prefix length, fetched lazily and reset on rejection."""

    def __init__(self, fetch_length: Callable[[], int]) -> None:
        self._fetch_length = fetch_length
        self._lock = threading.Lock()
        self._value: int | None = None

    @property
    def value(self) -> int | None:
        return self._value

    def get(self) -> int:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                fetched = self._fetch_length()
                if not isinstance(fetched, int) or isinstance(fetched, bool) or fetched <= 0:
                    raise ProtocolError(f"Invalid prefix length advertised: {fetched!r}")
                self._value = fetched
            return self._value

    def reset(self) -> None:
        self._value = None
