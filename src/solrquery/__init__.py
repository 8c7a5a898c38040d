"""solrquery — Typed Solr query parameters, wire encoding and HTTP client.

Quick start::

    from solrquery import Common, Facet, Standard, encode

    encode([Standard(q="loch torridon"), Common(rows=10), Facet(field="type")])
    # -> "q=loch+torridon&rows=10&facet=true&facet.field=type"
"""

from solrquery.encoder import encode
from solrquery.endpoint import Endpoint, resolve_endpoint
from solrquery.exceptions import (
    EndpointNotConfiguredError,
    MalformedQueryError,
    SolrConnectionError,
    SolrQueryError,
    UnsupportedInputError,
)
from solrquery.models import (
    Common,
    DisMax,
    Facet,
    FacetInterval,
    FacetRange,
    Highlight,
    HighlighterFastVector,
    HighlighterOriginal,
    HighlighterUnified,
    MoreLikeThis,
    SpellCheck,
    Standard,
    Suggest,
    Update,
)

__version__ = "0.1.0"

__all__ = [
    "Common",
    "DisMax",
    "Endpoint",
    "EndpointNotConfiguredError",
    "Facet",
    "FacetInterval",
    "FacetRange",
    "Highlight",
    "HighlighterFastVector",
    "HighlighterOriginal",
    "HighlighterUnified",
    "MalformedQueryError",
    "MoreLikeThis",
    "SolrConnectionError",
    "SolrQueryError",
    "SpellCheck",
    "Standard",
    "Suggest",
    "UnsupportedInputError",
    "Update",
    "__version__",
    "encode",
    "resolve_endpoint",
]
