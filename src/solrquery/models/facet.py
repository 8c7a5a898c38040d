"""Faceting parameter groups.

``Facet`` carries field/query faceting options and may embed one or more
``FacetRange`` and ``FacetInterval`` definitions::

    year = FacetRange(range="year", gap="+10YEARS", start=1700, end=1799)
    Facet(field=["type", "year"], query="year:[2000 TO NOW]", range=year)

A range or interval with ``per_field=True`` renders its options scoped to its
own field (``f.year.facet.range.gap``) so that several of them can be sent in
one request.
"""

from __future__ import annotations

from pydantic import Field

from solrquery.models.base import Multi, ParamGroup, Scalar


class FacetRange(ParamGroup):
    """Range faceting on a single field."""

    end: Scalar | None = Field(default=None, description="Upper bound of the ranges")
    gap: Scalar | None = Field(default=None, description="Span of each range, e.g. '+10YEARS'")
    hardend: bool | None = Field(default=None)
    include: Multi | None = Field(default=None, description="lower, upper, edge, outer or all")
    method: str | None = Field(default=None, description="filter or dv")
    other: Multi | None = Field(default=None, description="before, after, between, none or all")
    range: str | None = Field(default=None, description="Field to facet on")
    start: Scalar | None = Field(default=None, description="Lower bound of the ranges")
    per_field: bool = Field(default=False, description="Scope options to the range field")


class FacetInterval(ParamGroup):
    """Interval faceting on a single field."""

    interval: str | None = Field(default=None, description="Field to facet on")
    set: Multi | None = Field(default=None, description="Interval definitions, e.g. '[0,10]'")
    per_field: bool = Field(default=False, description="Scope options to the interval field")


class Facet(ParamGroup):
    """Field and query faceting parameters."""

    contains: str | None = Field(default=None)
    contains_ignoreCase: bool | None = Field(default=None, alias="contains.ignoreCase")
    enum_cache_minDf: int | None = Field(default=None, alias="enum.cache.minDf")
    excludeTerms: str | None = Field(default=None)
    exists: bool | None = Field(default=None)
    field: Multi | None = Field(default=None, description="Fields to facet on")
    limit: int | None = Field(default=None)
    matches: str | None = Field(default=None)
    method: str | None = Field(default=None, description="enum, fc or fcs")
    mincount: int | None = Field(default=None)
    missing: bool | None = Field(default=None)
    offset: int | None = Field(default=None)
    overrequest_count: int | None = Field(default=None, alias="overrequest.count")
    overrequest_ratio: float | None = Field(default=None, alias="overrequest.ratio")
    pivot: Multi | None = Field(default=None)
    pivot_mincount: int | None = Field(default=None, alias="pivot.mincount")
    prefix: str | None = Field(default=None)
    query: Multi | None = Field(default=None, description="Facet queries")
    sort: str | None = Field(default=None, description="count or index")
    threads: int | None = Field(default=None)

    range: FacetRange | list[FacetRange] | None = Field(default=None, description="Range facets")
    interval: FacetInterval | list[FacetInterval] | None = Field(default=None, description="Interval facets")
