"""Parameter encoder — turns parameter values into Solr's wire formats.

``encode()`` dispatches on the run-time type of its argument:

  - mappings and lists of ``(key, value)`` pairs are sent through unchecked
  - querying groups (``Standard``, ``Common``, ``DisMax``) keep their keys
  - component groups (facet, highlight, mlt, suggest, spellcheck) are
    switched on and namespaced according to ``PREFIX_RULES``
  - ``Update`` becomes a JSON body
  - a list of any of the query-string forms is encoded item by item

Supporting a new group kind means adding a rule to ``PREFIX_RULES`` or
registering one more ``encode`` implementation.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import singledispatch
from typing import Any

from solrquery.encoder.query_string import encode_pairs, group_pairs
from solrquery.encoder.rules import PREFIX_RULES, rule_for
from solrquery.encoder.update import encode_update
from solrquery.exceptions import UnsupportedInputError
from solrquery.models import Facet, ParamGroup, Update


def _join(segments: list[str]) -> str:
    return "&".join(segment for segment in segments if segment)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    return list(value) if isinstance(value, list) else [value]


@singledispatch
def encode(value: Any) -> str:
    """Encode Solr parameters as a query string, or an ``Update`` as JSON.

    Args:
        value: A parameter group, a mapping, a list of ``(key, value)``
            pairs, or a list mixing groups, mappings and pairs.

    Returns:
        The encoded query string (``""`` when every value is empty), or the
        JSON body for an ``Update``.

    Raises:
        UnsupportedInputError: If ``value`` is not an encodable shape.

    Example:
        >>> encode({"q": "loch", "rows": 10})
        'q=loch&rows=10'
        >>> encode([Standard(q="loch"), Facet(field="type")])
        'q=loch&facet=true&facet.field=type'
    """
    raise UnsupportedInputError(f"Cannot encode {type(value).__name__} as Solr parameters: {value!r}")


@encode.register(Mapping)
def _encode_mapping(value: Mapping) -> str:
    return encode_pairs(value.items())


@encode.register(list)
def _encode_list(value: list) -> str:
    segments: list[str] = []
    for item in value:
        if isinstance(item, tuple) and len(item) == 2:
            segments.append(encode_pairs([item]))
        elif isinstance(item, Update):
            raise UnsupportedInputError("Update groups encode to JSON and cannot be combined with query parameters")
        elif isinstance(item, Mapping | ParamGroup):
            segments.append(encode(item))
        else:
            raise UnsupportedInputError(f"Cannot encode list item {type(item).__name__}: {item!r}")
    return _join(segments)


@encode.register(ParamGroup)
def _encode_group(value: ParamGroup) -> str:
    rule = rule_for(type(value))
    if rule is None:
        raise UnsupportedInputError(f"No encoding rule for parameter group {type(value).__name__}")
    return encode_pairs(group_pairs(value, rule))


@encode.register(Facet)
def _encode_facet(value: Facet) -> str:
    segments = [encode_pairs(group_pairs(value, PREFIX_RULES[Facet]))]
    for nested in _as_list(value.range) + _as_list(value.interval):
        segments.append(encode(nested))
    return _join(segments)


@encode.register(Update)
def _encode_update(value: Update) -> str:
    return encode_update(value)
