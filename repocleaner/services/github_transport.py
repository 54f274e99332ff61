"""Authenticated HTTP transport for the GitHub REST API."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import httpx

from repocleaner.core.cancellation import CancellationToken
from repocleaner.core.errors import ApiError, TransportError

logger = logging.getLogger("RepoCleaner.Transport")

GITHUB_MEDIA_TYPE = "application/vnd.github.v3+json"


@dataclass(frozen=True)
class ApiRequest:
    method: str
    url: str
    credential: str = field(repr=False)
    params: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: Any
    links: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def next_page_url(self) -> Optional[str]:
        """URL of the ``rel="next"`` entry of the Link header, if any."""
        link = self.links.get("next")
        if not link:
            return None
        return link.get("url") or None


class GitHubTransport:
    """Sends ApiRequests and turns non-success answers into ApiErrors.

    Relative URLs are resolved against ``base_url``; cursor URLs taken from
    Link headers are absolute and used as given.
    """

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": GITHUB_MEDIA_TYPE},
                transport=self._transport,
            )
        return self._client

    async def send(
        self,
        request: ApiRequest,
        token: Optional[CancellationToken] = None,
    ) -> ApiResponse:
        """Send ``request``; with a token, the request aborts on cancellation."""
        if token is not None:
            return await token.guard(self._send(request))
        return await self._send(request)

    async def _send(self, request: ApiRequest) -> ApiResponse:
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self.client.request(
                request.method,
                request.url,
                params=request.params,
                headers={"Authorization": f"token {request.credential}"},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"{request.method} {request.url} failed: {e}")
            raise TransportError(f"Network error: {e}") from e

        if not response.is_success:
            raise _api_error(response)

        return ApiResponse(
            status_code=response.status_code,
            body=_decode_body(response),
            links=response.links,
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _api_error(response: httpx.Response) -> ApiError:
    server_message = None
    body = _decode_body(response)
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        server_message = body["message"] or None

    error = ApiError(response.status_code, response.reason_phrase, server_message)
    logger.warning(f"{response.request.method} {response.request.url} -> {error}")
    return error
