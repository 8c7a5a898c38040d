"""Serialization of parameter groups to query strings and JSON bodies."""

from solrquery.encoder.encoder import encode
from solrquery.encoder.rules import PREFIX_RULES, PrefixRule

__all__ = ["PREFIX_RULES", "PrefixRule", "encode"]
