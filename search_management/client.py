"""HTTP client and client factory for the search management API."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generator, Optional

import httpx

from .config import ManagementConfig, load_config
from .errors import ApiError
from .models import HttpResponse

logger = logging.getLogger(__name__)

METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PATCH = "PATCH"
METHOD_DELETE = "DELETE"

TokenProvider = Callable[[], str]


class BearerTokenAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` to every request.

    The token is read from *token_provider* on each request so callers can
    hand in short-lived signed tokens.
    """

    def __init__(self, token_provider: TokenProvider) -> None:
        self._token_provider = token_provider

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token_provider()}"
        yield request


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpClient:
    """Authenticated JSON client bound to one management API base URL.

    ``GET`` bodies are sent as query parameters, every other method sends
    its body as JSON.
    """

    def __init__(
        self,
        base_url: str,
        token_provider: Optional[TokenProvider] = None,
        timeout: float = 30.0,
        verify: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        auth = BearerTokenAuth(token_provider) if token_provider is not None else None
        self._client = httpx.Client(
            base_url=base_url,
            auth=auth,
            timeout=timeout,
            verify=verify,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def request(
        self,
        method: str,
        path: str,
        model: Optional[type] = None,
        body: Any = None,
    ) -> HttpResponse:
        """Send one request and return the decoded response.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``...).
            path: Path relative to the base URL.
            model: Optional record type; when given, the decoded body is
                validated into it with ``model.model_validate``.
            body: Query parameters for ``GET``, JSON payload otherwise.

        Raises:
            ApiError: on transport failures and on 4xx/5xx responses.
        """
        kwargs: dict[str, Any] = {}
        if body is not None:
            if method.upper() == METHOD_GET:
                kwargs["params"] = body
            else:
                kwargs["json"] = body

        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path.lstrip("/"), **kwargs)
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(f"{method} {path} failed: {exc}") from exc

        payload = _decode_body(response)
        if response.is_error:
            logger.warning("%s %s returned %d", method, path, response.status_code)
            raise ApiError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                body=payload,
            )

        if model is not None:
            payload = model.model_validate(payload)

        return HttpResponse(
            status_code=response.status_code,
            body=payload,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def create_client(
    config: Optional[ManagementConfig] = None,
    token_provider: Optional[TokenProvider] = None,
    transport: Optional[httpx.BaseTransport] = None,
    **overrides,
) -> HttpClient:
    """Create and return an HttpClient.

    Args:
        config: An explicit :class:`ManagementConfig`.  When ``None``,
            one is built via :func:`load_config` (env vars + *overrides*).
        token_provider: Callable returning the bearer token for each request.
            Defaults to the static ``config.token`` when one is set.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
        **overrides: Passed to :func:`load_config` when *config* is ``None``.

    Returns:
        A configured :class:`HttpClient`.
    """
    if config is None:
        config = load_config(**overrides)

    if token_provider is None and config.token:
        token = config.token
        token_provider = lambda: token  # noqa: E731

    return HttpClient(
        base_url=config.base_url,
        token_provider=token_provider,
        timeout=config.timeout,
        verify=config.verify_certs,
        transport=transport,
    )
