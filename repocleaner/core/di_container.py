"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

import httpx

from repocleaner.config import AppPaths, AppSettings
from repocleaner.domain.credentials import Credentials
from repocleaner.infrastructure.json_credential_store import JsonCredentialStore
from repocleaner.managers import (
    DeletionManager,
    NotificationManager,
    RepositorySession,
    ViewStateStore,
)
from repocleaner.services import CollectionSynchronizer, GitHubTransport


@dataclass
class AppContainer:
    settings: AppSettings
    paths: AppPaths
    http_transport: Optional[httpx.AsyncBaseTransport] = field(default=None, repr=False)

    _transport: Optional[GitHubTransport] = field(
        default=None, init=False, repr=False
    )
    _credential_store: Optional[JsonCredentialStore] = field(
        default=None, init=False, repr=False
    )
    _notifications: Optional[NotificationManager] = field(
        default=None, init=False, repr=False
    )

    @property
    def transport(self) -> GitHubTransport:
        if self._transport is None:
            self._transport = GitHubTransport(
                base_url=self.settings.api.base_url,
                timeout=self.settings.api.timeout_seconds,
                transport=self.http_transport,
            )
        return self._transport

    @property
    def credential_store(self) -> JsonCredentialStore:
        if self._credential_store is None:
            self._credential_store = JsonCredentialStore(self.paths.credentials_path)
        return self._credential_store

    @property
    def notifications(self) -> NotificationManager:
        if self._notifications is None:
            self._notifications = NotificationManager()
        return self._notifications

    def create_session(self, credentials: Credentials) -> RepositorySession:
        """Wire a fresh store, synchronizer and deletion flow for one login."""
        store = ViewStateStore(page_size=self.settings.display.page_size)
        synchronizer = CollectionSynchronizer(
            self.transport, per_page=self.settings.api.per_page
        )
        deletions = DeletionManager(self.transport, store, self.notifications)
        return RepositorySession(
            credentials=credentials,
            synchronizer=synchronizer,
            store=store,
            deletions=deletions,
            notifications=self.notifications,
        )

    async def aclose(self) -> None:
        if self._transport is not None:
            await self._transport.aclose()

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        paths: Optional[AppPaths] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or AppSettings.load(paths.config_path),
            paths=paths,
            http_transport=http_transport,
        )
