"""``application/x-www-form-urlencoded`` rendering of Solr parameters."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlencode

from solrquery.encoder.rules import PrefixRule
from solrquery.models import ParamGroup


def is_empty(value: Any) -> bool:
    """``None``, ``""`` and empty lists mean "not set"."""
    return value is None or (isinstance(value, str) and value == "") or (isinstance(value, list | tuple) and not value)


def render_value(value: Any) -> str:
    """Render a scalar the way Solr expects it (lowercase booleans)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def expand_pairs(pairs: Iterable[tuple[Any, Any]]) -> list[tuple[str, str]]:
    """Drop empty values and expand lists into repeated pairs, keeping order."""
    expanded: list[tuple[str, str]] = []
    for key, value in pairs:
        values = value if isinstance(value, list | tuple) else [value]
        for item in values:
            if is_empty(item):
                continue
            expanded.append((str(key), render_value(item)))
    return expanded


def encode_pairs(pairs: Iterable[tuple[Any, Any]]) -> str:
    """Percent-encode ``(key, value)`` pairs and join them with ``&``."""
    return urlencode(expand_pairs(pairs))


def group_pairs(group: ParamGroup, rule: PrefixRule) -> list[tuple[str, Any]]:
    """Convert a group's declared fields into wire ``(key, value)`` pairs."""
    field_name = getattr(group, rule.field_attr) if rule.field_attr else None
    per_field = bool(getattr(group, "per_field", False))

    pairs: list[tuple[str, Any]] = [(rule.flag, True)] if rule.flag else []
    for key, value in group.params():
        if key in rule.hidden:
            continue
        pairs.append((rule.render_key(key, field_name, per_field), value))
    return pairs
