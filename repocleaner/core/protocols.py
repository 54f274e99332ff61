"""Protocol definitions for dependency injection."""

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from repocleaner.core.cancellation import CancellationToken
    from repocleaner.domain.credentials import Credentials
    from repocleaner.services.github_transport import ApiRequest, ApiResponse


class TransportPort(Protocol):
    async def send(
        self,
        request: "ApiRequest",
        token: Optional["CancellationToken"] = None,
    ) -> "ApiResponse": ...


class CredentialStorePort(Protocol):
    def load(self) -> Optional["Credentials"]: ...

    def save(self, credentials: "Credentials") -> None: ...

    def clear(self) -> None: ...


class NotifierPort(Protocol):
    def success(self, title: str, description: str = "") -> None: ...

    def error(self, title: str, description: str = "") -> None: ...
