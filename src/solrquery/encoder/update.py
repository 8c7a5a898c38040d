"""JSON rendering of ``Update`` groups for Solr's ``/update`` handler.

Solr accepts repeated top-level command names in a single JSON body::

    {"delete":{"id":"tt1316540"},"delete":{"id":"tt1650453"},"commit":{}}

A Python ``dict`` cannot hold duplicate keys, so each command is serialized
as its own ``"name":{...}`` fragment and the fragments are joined in order:
delete by query, delete by id, add, commit, optimize, rollback.
"""

from __future__ import annotations

import json
from typing import Any

from solrquery.encoder.query_string import is_empty
from solrquery.exceptions import UnsupportedInputError
from solrquery.models import Update

_SEPARATORS = (",", ":")


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=_SEPARATORS)


def _present(value: Any) -> list[Any]:
    if isinstance(value, list):
        return [item for item in value if not is_empty(item)]
    return [] if is_empty(value) else [value]


def _options(**options: Any) -> dict[str, Any]:
    """Keep explicitly set options (``False`` included), sorted by key."""
    return {key: value for key, value in sorted(options.items()) if value is not None}


def update_commands(update: Update) -> list[tuple[str, dict[str, Any]]]:
    """List the ``(command, payload)`` pairs an update expands to, in send order."""
    commands: list[tuple[str, dict[str, Any]]] = []

    for query in _present(update.delete_query):
        commands.append(("delete", {"query": query}))
    for doc_id in _present(update.delete_id):
        commands.append(("delete", {"id": doc_id}))

    if not is_empty(update.doc):
        commands.append(
            ("add", _options(doc=update.doc, commitWithin=update.commitWithin, overwrite=update.overwrite))
        )
    if update.commit:
        commands.append(("commit", _options(expungeDeletes=update.expungeDeletes, waitSearcher=update.waitSearcher)))
    if update.optimize:
        commands.append(("optimize", _options(maxSegments=update.maxSegments, waitSearcher=update.waitSearcher)))
    if update.rollback:
        commands.append(("rollback", {}))

    return commands


def encode_update(update: Update) -> str:
    """Serialize an update as a compact JSON body.

    Raises:
        UnsupportedInputError: If a document holds a value JSON cannot
            represent, e.g. a ``datetime`` that was not formatted first.
    """
    try:
        fragments = [f"{_dumps(name)}:{_dumps(payload)}" for name, payload in update_commands(update)]
    except (TypeError, ValueError) as e:
        raise UnsupportedInputError(f"Cannot encode update as JSON: {e}") from e
    return "{" + ",".join(fragments) + "}"
