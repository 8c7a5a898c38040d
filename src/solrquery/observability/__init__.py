"""Logging setup."""

from solrquery.observability.logging import setup_logging

__all__ = ["setup_logging"]
