"""Solr endpoints — a core/collection URL plus request handler.

Endpoints are given either directly or by name. Named endpoints are looked
up in an explicitly passed ``Settings`` object::

    resolve_endpoint("http://localhost:8983/solr/films", settings)
    resolve_endpoint("suggester", settings)
    resolve_endpoint(Endpoint(url="http://localhost:8983/solr/films", handler="suggest"), settings)
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from solrquery.config.settings import Settings
from solrquery.exceptions import EndpointNotConfiguredError

logger = logging.getLogger(__name__)


class Endpoint(BaseModel):
    """A Solr core or collection endpoint with a request handler.

    ``url`` may also be a load balancer fronting several Solr nodes.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Core or collection URL")
    handler: str | None = Field(default="select", description="Request handler, e.g. select, suggest")
    headers: dict[str, str] = Field(default_factory=dict, description="HTTP headers")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")

    def __str__(self) -> str:
        base = self.url.rstrip("/")
        return f"{base}/{self.handler}" if self.handler else base

    def with_handler(self, handler: str | None) -> Endpoint:
        """Return a copy of this endpoint targeting another handler."""
        return self.model_copy(update={"handler": handler})


def resolve_endpoint(ref: Endpoint | str | None, settings: Settings | None = None) -> Endpoint:
    """Resolve an endpoint reference.

    Args:
        ref: An ``Endpoint``, a literal URL (anything containing ``://``),
            the name of a configured endpoint, or ``None`` for the configured
            default.
        settings: Settings holding the named endpoints.

    Returns:
        The resolved endpoint.

    Raises:
        EndpointNotConfiguredError: If a name has no configuration.
    """
    if isinstance(ref, Endpoint):
        return ref

    if ref is None:
        ref = settings.default_endpoint if settings else "default"
    if "://" in ref:
        return Endpoint(url=ref)

    endpoints = settings.endpoints if settings else {}
    config = endpoints.get(ref)
    if config is None:
        raise EndpointNotConfiguredError(
            f"Endpoint '{ref}' is not configured. Configured endpoints: {list(endpoints.keys())}"
        )
    logger.debug("Resolved endpoint '%s' to %s/%s", ref, config.url, config.handler)
    return Endpoint(url=config.url, handler=config.handler, headers=config.headers, timeout=config.timeout)


def default_endpoint(settings: Settings) -> Endpoint | None:
    """Return the configured default endpoint, or ``None`` if there is none."""
    try:
        return resolve_endpoint(None, settings)
    except EndpointNotConfiguredError:
        return None
