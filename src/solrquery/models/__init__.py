"""Structured, immutable Solr parameter groups."""

from solrquery.models.base import ParamGroup
from solrquery.models.component import MoreLikeThis, SpellCheck, Suggest
from solrquery.models.facet import Facet, FacetInterval, FacetRange
from solrquery.models.highlight import (
    Highlight,
    HighlighterFastVector,
    HighlighterOriginal,
    HighlighterUnified,
)
from solrquery.models.query import Common, DisMax, Standard
from solrquery.models.update import Update

__all__ = [
    "Common",
    "DisMax",
    "Facet",
    "FacetInterval",
    "FacetRange",
    "Highlight",
    "HighlighterFastVector",
    "HighlighterOriginal",
    "HighlighterUnified",
    "MoreLikeThis",
    "ParamGroup",
    "SpellCheck",
    "Standard",
    "Suggest",
    "Update",
]
