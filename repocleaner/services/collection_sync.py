"""Full-collection retrieval across cursor-paginated listing pages."""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple, Union

from pydantic import ValidationError

from repocleaner.core.cancellation import CancellationToken
from repocleaner.core.errors import (
    OperationCancelled,
    RepoCleanerError,
    ResponseShapeError,
)
from repocleaner.core.protocols import TransportPort
from repocleaner.domain.repository import Repository, UserProfile
from repocleaner.services.github_transport import ApiRequest

logger = logging.getLogger("RepoCleaner.Sync")

LISTING_PATH = "/user/repos"
PROFILE_PATH = "/user"


@dataclass(frozen=True)
class SyncSucceeded:
    repositories: Tuple[Repository, ...]
    profile: Optional[UserProfile] = None
    profile_error: Optional[RepoCleanerError] = None
    pages: int = 1


@dataclass(frozen=True)
class SyncFailed:
    error: RepoCleanerError
    profile: Optional[UserProfile] = None
    profile_error: Optional[RepoCleanerError] = None


@dataclass(frozen=True)
class SyncCancelled:
    pass


SyncOutcome = Union[SyncSucceeded, SyncFailed, SyncCancelled]


@dataclass
class _ProfileResult:
    profile: Optional[UserProfile] = None
    error: Optional[RepoCleanerError] = None


class CollectionSynchronizer:
    """Pulls every listing page for the authenticated account.

    Pages are fetched one after another since the cursor for page N+1 comes
    from page N's Link header. The profile lookup runs alongside the listing
    loop and never decides the outcome of the sync.
    """

    def __init__(self, transport: TransportPort, per_page: int = 100):
        self.transport = transport
        self.per_page = per_page

    async def sync_all(self, credential: str, token: CancellationToken) -> SyncOutcome:
        """Fetch the whole collection. Never raises for API or network errors."""
        profile_task = asyncio.ensure_future(self._fetch_profile(credential, token))
        try:
            try:
                repositories, pages = await self._fetch_listing(credential, token)
            except OperationCancelled:
                logger.info("Repository sync cancelled")
                return SyncCancelled()
            except RepoCleanerError as e:
                logger.error(f"Repository sync failed: {e}")
                profile = await profile_task
                if token.cancelled:
                    return SyncCancelled()
                return SyncFailed(
                    error=e, profile=profile.profile, profile_error=profile.error
                )

            profile = await profile_task
            if token.cancelled:
                logger.info("Repository sync cancelled after the last page")
                return SyncCancelled()
        finally:
            # The profile lookup never outlives the sync that started it
            if not profile_task.done():
                profile_task.cancel()
                await asyncio.gather(profile_task, return_exceptions=True)

        logger.info(f"Fetched {len(repositories)} repositories in {pages} page(s)")
        return SyncSucceeded(
            repositories=repositories,
            profile=profile.profile,
            profile_error=profile.error,
            pages=pages,
        )

    async def _fetch_listing(
        self, credential: str, token: CancellationToken
    ) -> Tuple[Tuple[Repository, ...], int]:
        url: Optional[str] = LISTING_PATH
        params: Optional[dict] = {
            "per_page": self.per_page,
            "sort": "updated",
            "type": "owner",
        }
        collected: List[Repository] = []
        seen_ids: Set[int] = set()
        pages = 0

        while url:
            response = await self.transport.send(
                ApiRequest("GET", url, credential, params), token
            )
            token.raise_if_cancelled()
            pages += 1

            if not isinstance(response.body, list):
                raise ResponseShapeError(
                    response.status_code,
                    "Expected a list of repositories from the listing endpoint",
                )
            for repository in _parse_page(response.status_code, response.body):
                if repository.id in seen_ids:
                    logger.warning(
                        f"Repository {repository.full_name} (id {repository.id}) "
                        f"appeared twice while paging, keeping the first copy"
                    )
                    continue
                seen_ids.add(repository.id)
                collected.append(repository)

            logger.debug(f"Page {pages}: {len(response.body)} repositories")
            url = response.next_page_url()
            # Cursor URLs already carry the query string
            params = None

        return tuple(collected), pages

    async def _fetch_profile(
        self, credential: str, token: CancellationToken
    ) -> _ProfileResult:
        try:
            response = await self.transport.send(
                ApiRequest("GET", PROFILE_PATH, credential), token
            )
            if not isinstance(response.body, dict):
                raise ResponseShapeError(
                    response.status_code, "Expected an object from the profile endpoint"
                )
            try:
                profile = UserProfile.model_validate(response.body)
            except ValidationError as e:
                raise ResponseShapeError(response.status_code, str(e)) from e
        except OperationCancelled:
            return _ProfileResult()
        except RepoCleanerError as e:
            logger.warning(f"Failed to fetch user profile: {e}")
            return _ProfileResult(error=e)

        logger.debug(f"Fetched profile for {profile.login}")
        return _ProfileResult(profile=profile)


def _parse_page(status_code: int, records: list) -> List[Repository]:
    try:
        return [Repository.model_validate(record) for record in records]
    except ValidationError as e:
        raise ResponseShapeError(status_code, f"Malformed repository record: {e}") from e
