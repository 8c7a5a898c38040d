"""Search component parameter groups — more-like-this, suggester and spellcheck."""

from __future__ import annotations

from pydantic import Field

from solrquery.models.base import Multi, ParamGroup, Scalar


class MoreLikeThis(ParamGroup):
    """MoreLikeThis component parameters (``mlt.*``)."""

    boost: bool | None = Field(default=None)
    count: int | None = Field(default=None, description="Similar documents per result")
    fl: str | None = Field(default=None, description="Similarity fields")
    interestingTerms: str | None = Field(default=None, description="list, details or none")
    match_include: bool | None = Field(default=None, alias="match.include")
    match_offset: int | None = Field(default=None, alias="match.offset")
    maxdf: int | None = Field(default=None)
    maxdfpct: int | None = Field(default=None)
    maxntp: int | None = Field(default=None)
    maxqt: int | None = Field(default=None)
    maxwl: int | None = Field(default=None)
    mindf: int | None = Field(default=None)
    mintf: int | None = Field(default=None)
    minwl: int | None = Field(default=None)
    qf: str | None = Field(default=None)


class Suggest(ParamGroup):
    """Suggester component parameters (``suggest.*``)."""

    build: bool | None = Field(default=None)
    buildAll: bool | None = Field(default=None)
    cfq: str | None = Field(default=None, description="Context filter query")
    count: int | None = Field(default=None)
    dictionary: Multi | None = Field(default=None)
    q: str | None = Field(default=None)
    reload: bool | None = Field(default=None)
    reloadAll: bool | None = Field(default=None)


class SpellCheck(ParamGroup):
    """Spellcheck component parameters (``spellcheck.*``)."""

    accuracy: Scalar | None = Field(default=None)
    alternativeTermCount: int | None = Field(default=None)
    build: bool | None = Field(default=None)
    collate: bool | None = Field(default=None)
    collateExtendedResults: bool | None = Field(default=None)
    collateMaxCollectDocs: int | None = Field(default=None)
    collateParam_q_op: str | None = Field(default=None, alias="collateParam.q.op")
    count: int | None = Field(default=None)
    dictionary: Multi | None = Field(default=None)
    extendedResults: bool | None = Field(default=None)
    maxCollationTries: int | None = Field(default=None)
    maxCollations: int | None = Field(default=None)
    maxResultsForSuggest: Scalar | None = Field(default=None)
    onlyMorePopular: bool | None = Field(default=None)
    q: str | None = Field(default=None)
    queryAnalyzerFieldType: str | None = Field(default=None)
    reload: bool | None = Field(default=None)
