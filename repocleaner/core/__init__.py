"""Core infrastructure: errors, cancellation, ports and dependency injection.

The container is not re-exported here because it imports the managers,
which themselves depend on this package.
"""

from .cancellation import CancellationToken
from .errors import (
    ApiError,
    IllegalTransitionError,
    OperationCancelled,
    RepoCleanerError,
    ResponseShapeError,
    TransportError,
)
from .protocols import CredentialStorePort, NotifierPort, TransportPort

__all__ = [
    "ApiError",
    "CancellationToken",
    "CredentialStorePort",
    "IllegalTransitionError",
    "NotifierPort",
    "OperationCancelled",
    "RepoCleanerError",
    "ResponseShapeError",
    "TransportError",
    "TransportPort",
]
