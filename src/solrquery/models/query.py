"""Querying parameter groups — standard parser, common and (e)DisMax parameters.

See the Solr reference guide, *Query Syntax and Parsers*.
"""

from __future__ import annotations

from pydantic import Field

from solrquery.models.base import Multi, ParamGroup, Scalar


class Standard(ParamGroup):
    """Standard (Lucene) query parser parameters.

    Example:
        >>> Standard(q="loch torridon", df="words_txt", q_op="AND")
    """

    df: str | None = Field(default=None, description="Default search field")
    q: str | None = Field(default=None, description="Query string")
    q_op: str | None = Field(default=None, alias="q.op", description="Default operator: AND or OR")
    sow: bool | None = Field(default=None, description="Split on whitespace")


class Common(ParamGroup):
    """Common query parameters understood by all search handlers.

    Includes the SolrCloud distributed-request parameters.
    """

    cache: bool | None = Field(default=None, description="Cache query and filter results")
    collection: str | None = Field(default=None, description="Collections to query (SolrCloud)")
    debug: Multi | None = Field(default=None, description="Debug sections, e.g. query, timing")
    debug_explain_structured: bool | None = Field(default=None, alias="debug.explain.structured")
    defType: str | None = Field(default=None, description="Query parser")
    distrib: bool | None = Field(default=None, description="Distribute the request across shards")
    echoParams: str | None = Field(default=None, description="explicit, all or none")
    explainOther: str | None = Field(default=None)
    fl: str | None = Field(default=None, description="Field list")
    fq: Multi | None = Field(default=None, description="Filter queries")
    logParamsList: str | None = Field(default=None)
    omitHeader: bool | None = Field(default=None)
    rows: int | None = Field(default=None, description="Number of documents to return")
    segmentTerminateEarly: bool | None = Field(default=None)
    shards: str | None = Field(default=None)
    shards_info: bool | None = Field(default=None, alias="shards.info")
    shards_preference: str | None = Field(default=None, alias="shards.preference")
    shards_tolerant: bool | None = Field(default=None, alias="shards.tolerant")
    sort: str | None = Field(default=None, description="Sort order, e.g. 'score desc'")
    start: int | None = Field(default=None, description="Offset into the result set")
    timeAllowed: int | None = Field(default=None, description="Time allowance in milliseconds")
    wt: str | None = Field(default=None, description="Response writer, e.g. json, xml")


class DisMax(ParamGroup):
    """DisMax and extended DisMax (edismax) query parser parameters."""

    bf: Multi | None = Field(default=None, description="Boost functions")
    boost: str | None = Field(default=None, description="Multiplicative boost function (edismax)")
    bq: Multi | None = Field(default=None, description="Boost queries")
    lowercaseOperators: bool | None = Field(default=None)
    mm: str | None = Field(default=None, description="Minimum should match")
    mm_autoRelax: bool | None = Field(default=None, alias="mm.autoRelax")
    pf: str | None = Field(default=None, description="Phrase fields")
    pf2: str | None = Field(default=None)
    pf3: str | None = Field(default=None)
    ps: Scalar | None = Field(default=None, description="Phrase slop")
    ps2: Scalar | None = Field(default=None)
    ps3: Scalar | None = Field(default=None)
    q: str | None = Field(default=None)
    q_alt: str | None = Field(default=None, alias="q.alt")
    qf: str | None = Field(default=None, description="Query fields with optional boosts")
    qs: Scalar | None = Field(default=None, description="Query phrase slop")
    sow: bool | None = Field(default=None)
    stopwords: bool | None = Field(default=None)
    tie: Scalar | None = Field(default=None, description="Tie breaker")
    uf: str | None = Field(default=None, description="User fields")
