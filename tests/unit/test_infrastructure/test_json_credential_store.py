"""Tests for JsonCredentialStore."""

import json
import stat
from pathlib import Path


def test_load_missing_file_returns_none(temp_credentials_path: Path):
    from repocleaner.infrastructure.json_credential_store import JsonCredentialStore

    assert JsonCredentialStore(temp_credentials_path).load() is None


def test_save_then_load(temp_credentials_path: Path, credentials):
    from repocleaner.infrastructure.json_credential_store import JsonCredentialStore

    store = JsonCredentialStore(temp_credentials_path)
    store.save(credentials)

    assert store.load() == credentials
    assert json.loads(temp_credentials_path.read_text()) == {
        "username": "octocat",
        "token": "ghp_abc123",
    }


def test_saved_file_is_private(temp_credentials_path: Path, credentials):
    from repocleaner.infrastructure.json_credential_store import JsonCredentialStore

    temp_credentials_path.parent.mkdir(parents=True)
    temp_credentials_path.write_text("{}")
    temp_credentials_path.chmod(0o644)

    JsonCredentialStore(temp_credentials_path).save(credentials)

    assert stat.S_IMODE(temp_credentials_path.stat().st_mode) == 0o600


def test_load_invalid_json(temp_credentials_path: Path):
    from repocleaner.infrastructure.json_credential_store import JsonCredentialStore

    temp_credentials_path.parent.mkdir(parents=True)
    temp_credentials_path.write_text("{not json")

    assert JsonCredentialStore(temp_credentials_path).load() is None


def test_load_non_object(temp_credentials_path: Path):
    from repocleaner.infrastructure.json_credential_store import JsonCredentialStore

    temp_credentials_path.parent.mkdir(parents=True)
    temp_credentials_path.write_text('["octocat"]')

    assert JsonCredentialStore(temp_credentials_path).load() is None


def test_load_credentials_that_no_longer_validate(temp_credentials_path: Path):
    from repocleaner.infrastructure.json_credential_store import JsonCredentialStore

    temp_credentials_path.parent.mkdir(parents=True)
    temp_credentials_path.write_text('{"username": "octocat", "token": "bad"}')

    assert JsonCredentialStore(temp_credentials_path).load() is None


def test_clear(temp_credentials_path: Path, credentials):
    from repocleaner.infrastructure.json_credential_store import JsonCredentialStore

    store = JsonCredentialStore(temp_credentials_path)
    store.save(credentials)

    store.clear()
    store.clear()

    assert not temp_credentials_path.exists()
    assert store.load() is None


def test_default_path_uses_xdg_config_home(tmp_path: Path, monkeypatch):
    from repocleaner.infrastructure.json_credential_store import JsonCredentialStore

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    store = JsonCredentialStore()

    assert store.path == tmp_path / "repo-cleaner" / "credentials.json"
