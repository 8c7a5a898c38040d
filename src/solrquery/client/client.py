"""Solr HTTP clients — async and sync clients for search and update requests.

Usage::

    settings = Settings.from_yaml("solrquery.yaml")

    # Async
    async with AsyncSolrClient(settings) as client:
        resp = await client.search([Standard(q="loch"), Common(rows=5)], "library")

    # Sync (wraps async client internally)
    client = SolrClient(settings)
    resp = client.update(Update(delete_id="tt1316540", commit=True))
    print(resp.status_code, resp.data)

Requests are sent once; HTTP error statuses are returned in the response and
only transport failures raise.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Coroutine, Mapping
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, Field

from solrquery.config.settings import Settings
from solrquery.encoder import encode
from solrquery.endpoint import Endpoint, resolve_endpoint
from solrquery.exceptions import MalformedQueryError, SolrConnectionError, UnsupportedInputError
from solrquery.models import ParamGroup, Update

_T = TypeVar("_T")

logger = logging.getLogger(__name__)

Query = str | Mapping[str, Any] | ParamGroup | list[Any]
"""A search query: keywords for ``q``, a mapping, a group, or a list of those or of pairs."""


class SolrResponse(BaseModel):
    """HTTP response from Solr."""

    status_code: int = Field(description="HTTP status code")
    body: str = Field(default="", description="Raw response body")
    url: str = Field(default="", description="Requested URL")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def data(self) -> Any:
        """The body decoded as JSON, or the raw text if it is not JSON."""
        if not self.body:
            return self.body
        try:
            return json.loads(self.body)
        except json.JSONDecodeError:
            return self.body

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> SolrResponse:
        return cls(
            status_code=response.status_code,
            body=response.text,
            url=str(response.request.url),
            headers=dict(response.headers),
        )


def encode_search_query(query: Any) -> str:
    """Encode a search query, rejecting anything that cannot be sent.

    A plain string is sent as the ``q`` parameter.

    Raises:
        MalformedQueryError: If the query is missing, empty or not encodable.
    """
    if query is None or (isinstance(query, str | list) and not query):
        raise MalformedQueryError("Malformed query: a non-empty query is required")
    if isinstance(query, Update):
        raise MalformedQueryError("Malformed query: updates are sent with update(), not search()")
    if isinstance(query, str):
        query = {"q": query}
    try:
        query_string = encode(query)
    except UnsupportedInputError as e:
        raise MalformedQueryError(f"Malformed query: {e}") from e
    if not query_string:
        raise MalformedQueryError("Malformed query: every parameter is empty")
    return query_string


# ═══════════════════════════════════════════════════════════════════════════════
# Async client
# ═══════════════════════════════════════════════════════════════════════════════


class AsyncSolrClient:
    """Async client for Solr search and update handlers.

    Args:
        settings: Settings holding the named endpoints. Loaded from the
            environment if None.
        timeout: Default request timeout in seconds (``settings.timeout`` if
            None). Endpoints may override it.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.

    Example::

        async with AsyncSolrClient(settings) as client:
            resp = await client.search("loch", "library")
            docs = resp.data["response"]["docs"]
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        timeout: float | None = None,
        **httpx_kwargs: Any,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        self._timeout = timeout if timeout is not None else self._settings.timeout
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout), **httpx_kwargs)

    async def __aenter__(self) -> AsyncSolrClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @property
    def settings(self) -> Settings:
        return self._settings

    # ── Search ──

    async def search(self, query: Query, endpoint: Endpoint | str | None = None) -> SolrResponse:
        """Send a search request.

        Args:
            query: Keywords (sent as ``q``), a mapping, a parameter group, or a
                list of groups, mappings and ``(key, value)`` pairs.
            endpoint: Endpoint, literal URL or configured endpoint name.
                Defaults to ``settings.default_endpoint``.

        Returns:
            The Solr response, whatever its status code.

        Raises:
            MalformedQueryError: If the query cannot be encoded; nothing is sent.
            EndpointNotConfiguredError: If the endpoint name is unknown.
            SolrConnectionError: If Solr cannot be reached.
        """
        query_string = encode_search_query(query)
        target = resolve_endpoint(endpoint, self._settings)
        url = f"{target}?{query_string}"
        return await self._send("GET", url, target)

    # ── Update ──

    async def update(
        self,
        update: Update,
        endpoint: Endpoint | str | None = None,
        *,
        handler: str | None = "update",
    ) -> SolrResponse:
        """Send an update request as a JSON body.

        Args:
            update: The update commands.
            endpoint: Endpoint, literal URL or configured endpoint name.
            handler: Update handler path, replacing the endpoint's handler.

        Returns:
            The Solr response, whatever its status code.
        """
        if not isinstance(update, Update):
            raise MalformedQueryError(f"Malformed update: expected Update, got {type(update).__name__}")
        body = encode(update)
        target = resolve_endpoint(endpoint, self._settings).with_handler(handler)
        return await self._send(
            "POST",
            str(target),
            target,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    # ── Raw ──

    async def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> SolrResponse:
        """Send a GET request to a fully built URL."""
        return await self._send("GET", url, Endpoint(url=url, handler=None, headers=dict(headers or {})))

    async def _send(
        self,
        method: str,
        url: str,
        endpoint: Endpoint,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> SolrResponse:
        request_kwargs: dict[str, Any] = {"headers": {**endpoint.headers, **(headers or {})}}
        if content is not None:
            request_kwargs["content"] = content
        if endpoint.timeout is not None:
            request_kwargs["timeout"] = endpoint.timeout

        logger.debug("Solr request: %s %s", method, url)
        try:
            resp = await self._client.request(method, url, **request_kwargs)
        except httpx.TransportError as e:
            logger.warning("Solr request failed: %s %s (%s)", method, url, e)
            raise SolrConnectionError(f"Failed to reach Solr at {url}: {e}") from e

        logger.debug("Solr response: HTTP %d for %s", resp.status_code, url)
        return SolrResponse.from_httpx(resp)


# ═══════════════════════════════════════════════════════════════════════════════
# Sync client (wraps AsyncSolrClient)
# ═══════════════════════════════════════════════════════════════════════════════


class SolrClient:
    """Synchronous client for Solr.

    Wraps :class:`AsyncSolrClient` using ``asyncio.run``.

    Args:
        settings: Settings holding the named endpoints.
        timeout: Default request timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        timeout: float | None = None,
        **httpx_kwargs: Any,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        self._timeout = timeout
        self._httpx_kwargs = httpx_kwargs

    def _run(self, coro: Coroutine[Any, Any, _T]) -> _T:
        """Run an async coroutine synchronously."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop and loop.is_running():
            # Already inside an event loop (e.g. Jupyter)
            import concurrent.futures

            with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
                return pool.submit(asyncio.run, coro).result()
        return asyncio.run(coro)

    def _make_client(self) -> AsyncSolrClient:
        return AsyncSolrClient(self._settings, timeout=self._timeout, **self._httpx_kwargs)

    def search(self, query: Query, endpoint: Endpoint | str | None = None) -> SolrResponse:
        """Send a search request. See :meth:`AsyncSolrClient.search`."""

        async def _call() -> SolrResponse:
            async with self._make_client() as c:
                return await c.search(query, endpoint)

        return self._run(_call())

    def update(
        self,
        update: Update,
        endpoint: Endpoint | str | None = None,
        *,
        handler: str | None = "update",
    ) -> SolrResponse:
        """Send an update request. See :meth:`AsyncSolrClient.update`."""

        async def _call() -> SolrResponse:
            async with self._make_client() as c:
                return await c.update(update, endpoint, handler=handler)

        return self._run(_call())

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> SolrResponse:
        """Send a GET request to a fully built URL."""

        async def _call() -> SolrResponse:
            async with self._make_client() as c:
                return await c.get(url, headers=headers)

        return self._run(_call())
