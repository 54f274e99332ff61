"""Error taxonomy shared by the transport, synchronizer and deletion flow."""

from typing import Optional


class RepoCleanerError(Exception):
    """Base class for failures that are reported to the user."""


class TransportError(RepoCleanerError):
    """Network-level failure: the request never produced an HTTP response."""


class ApiError(RepoCleanerError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        server_message: Optional[str] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.server_message = server_message
        super().__init__(self._format())

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()

    def _format(self) -> str:
        if self.server_message:
            return f"{self.status_line} - {self.server_message}"
        return self.status_line


class ResponseShapeError(ApiError):
    """The API answered with a success status but an unexpected body."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code, "Unexpected response shape", detail)


class OperationCancelled(Exception):
    """The operation's cancellation token was triggered.

    Never shown to the user; callers discard the operation silently.
    """


class IllegalTransitionError(RuntimeError):
    """A deletion state machine transition that is not allowed from the current state."""
