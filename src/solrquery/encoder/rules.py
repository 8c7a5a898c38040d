"""Key rewriting rules for each parameter group kind.

Solr namespaces component parameters (``facet.limit``, ``hl.snippets``) and
allows most of them to be overridden for a single field
(``f.title.hl.snippets``). Each group kind gets one ``PrefixRule`` in
``PREFIX_RULES`` describing how its field names become wire keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

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
    ParamGroup,
    SpellCheck,
    Standard,
    Suggest,
)


@dataclass(frozen=True)
class PrefixRule:
    """How a group's field names are rendered as Solr parameter keys.

    Attributes:
        prefix: Namespace prepended to each key (``facet.range``). ``None``
            leaves keys unchanged.
        flag: Component switch emitted first as ``<flag>=true``.
        field_attr: Attribute holding the field name used for per-field keys.
        global_keys: Keys always rendered in this fixed form, whatever the
            per-field setting.
        hidden: Attributes that are never rendered as parameters.
    """

    prefix: str | None = None
    flag: str | None = None
    field_attr: str | None = None
    global_keys: Mapping[str, str] = field(default_factory=dict)
    hidden: frozenset[str] = frozenset({"per_field"})

    def render_key(self, key: str, field_name: str | None = None, per_field: bool = False) -> str:
        """Render ``key`` as a wire key.

        Example:
            >>> rule = PREFIX_RULES[FacetRange]
            >>> rule.render_key("gap")
            'facet.range.gap'
            >>> rule.render_key("gap", "year", per_field=True)
            'f.year.facet.range.gap'
            >>> rule.render_key("range", "year", per_field=True)
            'facet.range'
        """
        if key in self.global_keys:
            return self.global_keys[key]
        if self.prefix is None:
            return key
        if per_field and field_name:
            return f"f.{field_name}.{self.prefix}.{key}"
        return f"{self.prefix}.{key}"


_PLAIN = PrefixRule()
_FIELD_SCOPING = frozenset({"field", "per_field"})
_HIGHLIGHTER = PrefixRule(prefix="hl", field_attr="field", hidden=_FIELD_SCOPING)

PREFIX_RULES: dict[type[ParamGroup], PrefixRule] = {
    Standard: _PLAIN,
    Common: _PLAIN,
    DisMax: _PLAIN,
    # range and interval sub-values are encoded separately, after the facet options
    Facet: PrefixRule(prefix="facet", flag="facet", hidden=frozenset({"range", "interval"})),
    FacetRange: PrefixRule(
        prefix="facet.range",
        field_attr="range",
        global_keys={"range": "facet.range", "method": "facet.range.method"},
    ),
    FacetInterval: PrefixRule(
        prefix="facet.interval",
        field_attr="interval",
        global_keys={"interval": "facet.interval"},
    ),
    Highlight: PrefixRule(prefix="hl", flag="hl", field_attr="field", hidden=_FIELD_SCOPING),
    HighlighterUnified: _HIGHLIGHTER,
    HighlighterOriginal: _HIGHLIGHTER,
    HighlighterFastVector: _HIGHLIGHTER,
    MoreLikeThis: PrefixRule(prefix="mlt", flag="mlt"),
    Suggest: PrefixRule(prefix="suggest", flag="suggest"),
    SpellCheck: PrefixRule(prefix="spellcheck", flag="spellcheck"),
}


def rule_for(group_type: type[ParamGroup]) -> PrefixRule | None:
    """Look up the rule for a group type, honouring subclasses."""
    for cls in group_type.__mro__:
        if cls in PREFIX_RULES:
            return PREFIX_RULES[cls]
    return None
