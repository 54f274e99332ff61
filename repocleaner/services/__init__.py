"""Remote API services."""

from .collection_sync import (
    CollectionSynchronizer,
    SyncCancelled,
    SyncFailed,
    SyncOutcome,
    SyncSucceeded,
)
from .github_transport import ApiRequest, ApiResponse, GitHubTransport

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "CollectionSynchronizer",
    "GitHubTransport",
    "SyncCancelled",
    "SyncFailed",
    "SyncOutcome",
    "SyncSucceeded",
]
