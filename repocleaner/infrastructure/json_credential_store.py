"""JSON-based credential storage.

Keeps the login and access token in a JSON file readable only by the
current user, by default ~/.config/repo-cleaner/credentials.json.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from repocleaner.domain.credentials import Credentials

logger = logging.getLogger("RepoCleaner.JsonCredentialStore")


class JsonCredentialStore:
    """Credential store using a JSON file backend."""

    def __init__(self, path: Optional[Path] = None):
        if path is None:
            xdg_config_home = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
            path = Path(xdg_config_home) / "repo-cleaner" / "credentials.json"
        self.path = Path(path)

    def load(self) -> Optional[Credentials]:
        """Stored credentials, or None when absent or no longer valid."""
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, IOError) as e:
            logger.error("Error loading credentials: %s", e)
            return None

        if not isinstance(data, dict):
            logger.error("Credential file %s does not hold an object", self.path)
            return None

        try:
            return Credentials(
                username=data.get("username", ""),
                token=data.get("token", ""),
            )
        except ValidationError:
            logger.warning("Stored credentials failed validation, ignoring them")
            return None

    def save(self, credentials: Credentials) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"username": credentials.username, "token": credentials.token}
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            json.dump(payload, f, indent=2)
        # O_CREAT's mode only applies to new files
        os.chmod(self.path, 0o600)
        logger.info("Credentials saved for %s", credentials.username)

    def clear(self) -> None:
        try:
            self.path.unlink()
            logger.info("Stored credentials removed")
        except FileNotFoundError:
            pass
