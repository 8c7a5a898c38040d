"""Library exceptions."""


class SolrQueryError(Exception):
    """Base exception for solrquery errors."""


class UnsupportedInputError(SolrQueryError):
    """Raised when a value cannot be encoded as Solr parameters."""


class MalformedQueryError(SolrQueryError):
    """Raised when a search is attempted with a missing or malformed query.

    Nothing has been sent to Solr when this is raised.
    """


class EndpointNotConfiguredError(SolrQueryError):
    """Raised when a named endpoint has no configuration."""


class SolrConnectionError(SolrQueryError):
    """Raised when Solr cannot be reached (refused, timeout, DNS failure)."""
