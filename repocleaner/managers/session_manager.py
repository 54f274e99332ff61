"""One signed-in session: sync supersession, teardown and the deletion flow."""

import logging
from typing import Optional

from repocleaner.core.cancellation import CancellationToken
from repocleaner.domain.credentials import Credentials
from repocleaner.domain.repository import Repository
from repocleaner.managers.deletion_manager import DeletionManager, DeletionOutcome
from repocleaner.managers.notification_manager import NotificationManager
from repocleaner.managers.view_state_manager import ViewStateStore
from repocleaner.services.collection_sync import (
    CollectionSynchronizer,
    SyncCancelled,
    SyncFailed,
    SyncOutcome,
    SyncSucceeded,
)

logger = logging.getLogger("RepoCleaner.Session")


class RepositorySession:
    """Binds the credentials of one login to the store and the remote flows.

    At most one sync is active: starting a new one cancels the previous
    token, and the superseded sync's completion is dropped without touching
    the store. ``close()`` cancels whatever is still running.
    All methods must be called from the event loop that runs the session.
    """

    def __init__(
        self,
        credentials: Credentials,
        synchronizer: CollectionSynchronizer,
        store: ViewStateStore,
        deletions: DeletionManager,
        notifications: NotificationManager,
    ):
        self.credentials = credentials
        self.synchronizer = synchronizer
        self.store = store
        self.deletions = deletions
        self.notifications = notifications
        self._sync_token: Optional[CancellationToken] = None
        self._sync_generation = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def sync(self) -> SyncOutcome:
        """Replace the mirror with a fresh copy of the remote collection."""
        if self._closed:
            logger.debug("Ignoring sync request on a closed session")
            return SyncCancelled()

        if self._sync_token is not None:
            self._sync_token.cancel()
        self._sync_generation += 1
        token = CancellationToken(f"sync #{self._sync_generation}")
        self._sync_token = token

        logger.info(f"Syncing repositories for {self.credentials.username}")
        self.store.set_loading(True)
        try:
            outcome = await self.synchronizer.sync_all(self.credentials.token, token)
            if token.cancelled or isinstance(outcome, SyncCancelled):
                return SyncCancelled()
            self._commit(outcome)
        finally:
            if self._sync_token is token:
                self._sync_token = None
                self.store.set_loading(False)

        return outcome

    def _commit(self, outcome: SyncOutcome) -> None:
        if outcome.profile is not None:
            self.store.set_profile(outcome.profile)
        if outcome.profile_error is not None:
            self.notifications.error("Error fetching profile", str(outcome.profile_error))

        if isinstance(outcome, SyncSucceeded):
            self.store.replace_mirror(outcome.repositories)
        elif isinstance(outcome, SyncFailed):
            self.notifications.error("Error fetching repositories", str(outcome.error))

    def request_deletion(self, repository: Repository) -> None:
        self.deletions.request_deletion(repository)

    def cancel_deletion(self) -> None:
        self.deletions.cancel_deletion()

    async def confirm_deletion(self) -> DeletionOutcome:
        return await self.deletions.confirm_deletion(self.credentials.token)

    def close(self) -> None:
        """Tear the session down; a running sync is cancelled."""
        if self._closed:
            return
        self._closed = True
        if self._sync_token is not None:
            self._sync_token.cancel()
            self._sync_token = None
        self.store.set_loading(False)
        logger.info(f"Session for {self.credentials.username} closed")
