class SharedEditsError(Exception):
    """Base class for failures talking to the shared edits service."""


class ProtocolError(SharedEditsError):
    """The range index rejected a query in a way the client does not handle."""


class NetworkError(SharedEditsError):
    """Transport failure or timeout."""


class RejectedError(SharedEditsError):
    """The record store declined a fetch or submission."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
