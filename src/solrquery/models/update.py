"""Update request group — add, delete, commit, optimize and rollback commands.

An ``Update`` is encoded as a JSON body for Solr's ``/update`` handler rather
than as a query string. Several commands may be combined in one request::

    Update(doc=[doc1, doc2], commitWithin=50, overwrite=True)
    Update(delete_id=["tt1316540", "tt1650453"], commit=True, waitSearcher=False)

``waitSearcher`` applies to both ``commit`` and ``optimize``.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from solrquery.models.base import Multi, ParamGroup

Document = dict[str, Any]

UniqueKey = str | int
"""A document unique key; numeric keys are sent as JSON numbers."""


class Update(ParamGroup):
    """Document mutation request."""

    doc: Document | list[Document] | None = Field(default=None, description="Document(s) to add")
    commitWithin: int | None = Field(default=None, description="Commit added documents within N ms")
    overwrite: bool | None = Field(default=None, description="Replace documents with the same unique key")

    commit: bool | None = Field(default=None)
    optimize: bool | None = Field(default=None)
    rollback: bool | None = Field(default=None)
    expungeDeletes: bool | None = Field(default=None, description="Commit option")
    maxSegments: int | None = Field(default=None, description="Optimize option")
    waitSearcher: bool | None = Field(default=None, description="Commit and optimize option")

    delete_id: UniqueKey | list[UniqueKey | None] | None = Field(default=None, description="Delete by unique key")
    delete_query: Multi | None = Field(default=None, description="Delete by query")
