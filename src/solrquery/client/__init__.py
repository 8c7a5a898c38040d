"""Solr HTTP clients.

Quick start::

    from solrquery.client import SolrClient

    client = SolrClient()
    resp = client.search("loch", "http://localhost:8983/solr/gettingstarted")
"""

from solrquery.client.client import AsyncSolrClient, SolrClient, SolrResponse

__all__ = ["AsyncSolrClient", "SolrClient", "SolrResponse"]
