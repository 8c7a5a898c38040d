"""Highlighting parameter groups.

``Highlight`` holds the options shared by every highlighter and switches
highlighting on. The highlighter-specific groups are sent alongside it::

    [Highlight(fl="title,words", method="unified"), HighlighterUnified(offsetSource="POSTINGS")]

Any of them may be scoped to one field with ``field`` and ``per_field=True``,
rendering ``f.<field>.hl.<option>`` instead of ``hl.<option>``.
"""

from __future__ import annotations

from pydantic import Field

from solrquery.models.base import ParamGroup, Scalar


class Highlight(ParamGroup):
    """Common highlighting parameters."""

    encoder: str | None = Field(default=None, description="Escape snippets, e.g. html")
    fl: str | None = Field(default=None, description="Fields to highlight")
    fragsize: int | None = Field(default=None)
    highlightMultiTerm: bool | None = Field(default=None)
    maxAnalyzedChars: int | None = Field(default=None)
    method: str | None = Field(default=None, description="unified, original or fastVector")
    q: str | None = Field(default=None)
    qparser: str | None = Field(default=None)
    requireFieldMatch: bool | None = Field(default=None)
    snippets: int | None = Field(default=None)
    tag_post: str | None = Field(default=None, alias="tag.post")
    tag_pre: str | None = Field(default=None, alias="tag.pre")
    usePhraseHighlighter: bool | None = Field(default=None)

    field: str | None = Field(default=None, description="Field for per-field options")
    per_field: bool = Field(default=False)


class HighlighterUnified(ParamGroup):
    """Unified highlighter parameters."""

    bs_country: str | None = Field(default=None, alias="bs.country")
    bs_language: str | None = Field(default=None, alias="bs.language")
    bs_separator: str | None = Field(default=None, alias="bs.separator")
    bs_type: str | None = Field(default=None, alias="bs.type")
    bs_variant: str | None = Field(default=None, alias="bs.variant")
    defaultSummary: bool | None = Field(default=None)
    offsetSource: str | None = Field(default=None, description="ANALYSIS, POSTINGS, TERM_VECTORS...")
    score_b: Scalar | None = Field(default=None, alias="score.b")
    score_k1: Scalar | None = Field(default=None, alias="score.k1")
    score_pivot: Scalar | None = Field(default=None, alias="score.pivot")
    tag_ellipsis: str | None = Field(default=None, alias="tag.ellipsis")
    weightMatches: bool | None = Field(default=None)

    field: str | None = Field(default=None)
    per_field: bool = Field(default=False)


class HighlighterOriginal(ParamGroup):
    """Original highlighter parameters."""

    alternateField: str | None = Field(default=None)
    formatter: str | None = Field(default=None)
    fragmenter: str | None = Field(default=None)
    highlightAlternate: bool | None = Field(default=None)
    maxAlternateFieldLength: int | None = Field(default=None)
    maxMultiValuedToExamine: int | None = Field(default=None)
    maxMultiValuedToMatch: int | None = Field(default=None)
    mergeContiguous: bool | None = Field(default=None)
    payloads: bool | None = Field(default=None)
    preserveMulti: bool | None = Field(default=None)
    regex_maxAnalyzedChars: int | None = Field(default=None, alias="regex.maxAnalyzedChars")
    regex_pattern: str | None = Field(default=None, alias="regex.pattern")
    regex_slop: Scalar | None = Field(default=None, alias="regex.slop")
    simple_post: str | None = Field(default=None, alias="simple.post")
    simple_pre: str | None = Field(default=None, alias="simple.pre")

    field: str | None = Field(default=None)
    per_field: bool = Field(default=False)


class HighlighterFastVector(ParamGroup):
    """FastVector highlighter parameters."""

    alternateField: str | None = Field(default=None)
    boundaryScanner: str | None = Field(default=None)
    bs_chars: str | None = Field(default=None, alias="bs.chars")
    bs_country: str | None = Field(default=None, alias="bs.country")
    bs_language: str | None = Field(default=None, alias="bs.language")
    bs_maxScan: int | None = Field(default=None, alias="bs.maxScan")
    bs_type: str | None = Field(default=None, alias="bs.type")
    fragListBuilder: str | None = Field(default=None)
    fragmentsBuilder: str | None = Field(default=None)
    highlightAlternate: bool | None = Field(default=None)
    maxAlternateFieldLength: int | None = Field(default=None)
    multiValuedSeparatorChar: str | None = Field(default=None)
    phraseLimit: int | None = Field(default=None)

    field: str | None = Field(default=None)
    per_field: bool = Field(default=False)
