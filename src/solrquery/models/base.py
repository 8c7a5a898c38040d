"""Base class for structured Solr parameter groups.

A parameter group is an immutable pydantic model whose fields are Solr
request parameters. Wire keys that are not valid Python identifiers
(``q.op``, ``hl.tag.pre``...) are declared through field aliases, and either
form is accepted at construction::

    Standard(q="loch", q_op="AND")
    Standard(**{"q": "loch", "q.op": "AND"})

Fields are declared in the byte order of their wire keys, which is the order
the encoder emits them in.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

Scalar = str | int | float | bool
"""A single Solr parameter value."""

Multi = str | list[str | None]
"""One value or a list of values; lists become repeated parameters."""


class ParamGroup(BaseModel):
    """A structured, immutable group of Solr parameters."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def params(self) -> list[tuple[str, Any]]:
        """Return ``(wire_key, value)`` pairs in declared field order.

        Every declared field is returned, including unset ones; dropping
        empty values is the encoder's job.
        """
        return [(field.alias or name, getattr(self, name)) for name, field in type(self).model_fields.items()]
