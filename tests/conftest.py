"""Pytest configuration and shared fixtures."""

from itertools import count
from pathlib import Path

import pytest

_ids = count(1)


def repository_record(name: str, **overrides) -> dict:
    """A listing entry shaped like the GitHub REST API returns it."""
    repo_id = overrides.pop("id", next(_ids) + 1000)
    owner = overrides.pop("owner", "octocat")
    record = {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "description": f"The {name} project",
        "html_url": f"https://github.com/{owner}/{name}",
        "stargazers_count": 0,
        "forks_count": 0,
        "language": "Python",
        "private": False,
        "fork": False,
        "updated_at": "2024-01-15T10:00:00Z",
        "owner": {"login": owner, "avatar_url": None, "html_url": None},
    }
    record.update(overrides)
    return record


@pytest.fixture
def make_record():
    return repository_record


@pytest.fixture
def make_repo():
    from repocleaner.domain.repository import Repository

    def factory(name: str, **overrides) -> Repository:
        return Repository.model_validate(repository_record(name, **overrides))

    return factory


@pytest.fixture
def profile_record() -> dict:
    return {"login": "octocat", "name": "The Octocat", "avatar_url": None}


@pytest.fixture
def credentials():
    from repocleaner.domain.credentials import Credentials

    return Credentials(username="octocat", token="ghp_abc123")


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def temp_credentials_path(tmp_path: Path) -> Path:
    return tmp_path / "repo-cleaner" / "credentials.json"


@pytest.fixture
def temp_css_path(tmp_path: Path) -> Path:
    css_path = tmp_path / "style.css"
    css_path.write_text("/* test css */")
    return css_path


@pytest.fixture
def temp_paths(temp_config_path, temp_credentials_path, temp_css_path):
    from repocleaner.config import AppPaths

    return AppPaths(
        config_path=temp_config_path,
        credentials_path=temp_credentials_path,
        css_path=temp_css_path,
    )


class FakeGitHub:
    """In-memory stand-in for the GitHub REST API behind httpx.MockTransport."""

    base_url = "https://api.github.com"

    def __init__(self):
        self.pages = [[]]
        self.profile = {"login": "octocat", "name": "The Octocat", "avatar_url": None}
        self.profile_status = 200
        self.listing_status = 200
        self.delete_status = {}
        self.requests = []
        self.before_response = None
        self.link_header = None

    def handler(self, request):
        import httpx

        self.requests.append(request)
        if self.before_response is not None:
            self.before_response(request)

        path = request.url.path
        if request.method == "GET" and path == "/user/repos":
            if self.listing_status != 200:
                return httpx.Response(self.listing_status, json={"message": "Bad credentials"})
            page = int(request.url.params.get("page", "1"))
            headers = {}
            if page < len(self.pages):
                headers["Link"] = (
                    f'<{self.base_url}/user/repos?page={page + 1}&per_page=100>; rel="next", '
                    f'<{self.base_url}/user/repos?page={len(self.pages)}&per_page=100>; rel="last"'
                )
            if self.link_header is not None:
                headers["Link"] = self.link_header
            return httpx.Response(200, json=self.pages[page - 1], headers=headers)
        if request.method == "GET" and path == "/user":
            if self.profile_status != 200:
                return httpx.Response(self.profile_status, json={"message": "Server Error"})
            return httpx.Response(200, json=self.profile)
        if request.method == "DELETE" and path.startswith("/repos/"):
            status = self.delete_status.get(path, 204)
            if status == 204:
                return httpx.Response(204)
            return httpx.Response(status, json={"message": "Must have admin rights to Repository."})
        return httpx.Response(404, json={"message": "Not Found"})

    def listing_requests(self):
        return [r for r in self.requests if r.url.path == "/user/repos"]


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def github_transport(fake_github):
    import httpx

    from repocleaner.services.github_transport import GitHubTransport

    return GitHubTransport(
        base_url=FakeGitHub.base_url,
        transport=httpx.MockTransport(fake_github.handler),
    )
