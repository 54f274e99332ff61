"""Single-repository deletion with user confirmation.

State machine::

    Idle -> AwaitingConfirmation -> InFlight -> Settled -> Idle
                    |
                    +-- cancel --> Idle

The states are explicit values, so a second confirmation while a request
is in flight is rejected instead of sending another DELETE.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from repocleaner.core.errors import IllegalTransitionError, RepoCleanerError
from repocleaner.core.protocols import NotifierPort, TransportPort
from repocleaner.domain.repository import Repository
from repocleaner.managers.view_state_manager import ViewStateStore
from repocleaner.services.github_transport import ApiRequest

logger = logging.getLogger("RepoCleaner.DeletionManager")


@dataclass(frozen=True)
class DeletionOutcome:
    repository: Repository
    error: Optional[RepoCleanerError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class AwaitingConfirmation:
    repository: Repository


@dataclass(frozen=True)
class InFlight:
    repository: Repository


@dataclass(frozen=True)
class Settled:
    repository: Repository
    outcome: DeletionOutcome


DeletionState = Union[Idle, AwaitingConfirmation, InFlight, Settled]


class DeletionManager:
    def __init__(
        self,
        transport: TransportPort,
        store: ViewStateStore,
        notifier: NotifierPort,
    ):
        self.transport = transport
        self.store = store
        self.notifier = notifier
        self._state: DeletionState = Idle()
        self._listeners: List[Callable[[DeletionState], None]] = []

    @property
    def state(self) -> DeletionState:
        return self._state

    @property
    def pending(self) -> Optional[Repository]:
        """The repository awaiting confirmation or being deleted."""
        if isinstance(self._state, (AwaitingConfirmation, InFlight)):
            return self._state.repository
        return None

    @property
    def can_confirm(self) -> bool:
        return isinstance(self._state, AwaitingConfirmation)

    @property
    def can_dismiss(self) -> bool:
        return not isinstance(self._state, InFlight)

    def subscribe(self, listener: Callable[[DeletionState], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def request_deletion(self, repository: Repository) -> None:
        if not isinstance(self._state, Idle):
            raise IllegalTransitionError(
                f"Cannot request deletion of {repository.full_name} while "
                f"{type(self._state).__name__}"
            )
        self._set_state(AwaitingConfirmation(repository))

    def cancel_deletion(self) -> None:
        if isinstance(self._state, InFlight):
            raise IllegalTransitionError(
                "A deletion request cannot be dismissed while it is in flight"
            )
        if isinstance(self._state, AwaitingConfirmation):
            logger.debug(f"Deletion of {self._state.repository.full_name} cancelled")
            self._set_state(Idle())

    async def confirm_deletion(self, credential: str) -> DeletionOutcome:
        """Delete the pending repository remotely, then update the mirror.

        API and network failures are reported through the notifier and
        returned in the outcome; they are never raised.
        """
        if not isinstance(self._state, AwaitingConfirmation):
            raise IllegalTransitionError(
                f"Nothing to confirm while {type(self._state).__name__}"
            )

        repository = self._state.repository
        self._set_state(InFlight(repository))
        logger.info(f"Deleting repository {repository.full_name}")

        try:
            await self.transport.send(
                ApiRequest("DELETE", repository.delete_path, credential)
            )
        except asyncio.CancelledError:
            # The task running the request was torn down; the remote result is unknown
            logger.warning(f"Deletion of {repository.full_name} interrupted")
            self._set_state(Idle())
            raise
        except RepoCleanerError as e:
            outcome = DeletionOutcome(repository, error=e)
            self.notifier.error(
                "Error deleting repository",
                f"Failed to delete repository: {e}",
            )
        else:
            outcome = DeletionOutcome(repository)
            self.store.remove_repository(repository.id)
            self.notifier.success(
                "Repository deleted",
                f"{repository.display_name} has been permanently deleted",
            )

        self._set_state(Settled(repository, outcome))
        self._set_state(Idle())
        return outcome

    def _set_state(self, state: DeletionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
