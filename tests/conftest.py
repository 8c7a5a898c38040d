"""Shared test fixtures and configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from solrquery.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with a few named endpoints."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        endpoints={
            "default": {"url": "http://localhost:8983/solr/gettingstarted"},
            "suggester": {"url": "http://localhost:8983/solr/collection", "handler": "suggest"},
            "library": {
                "url": "http://localhost:8984/solr/articles/",
                "handler": "dismax",
                "headers": {"accept": "application/json"},
                "timeout": 10,
            },
        },
    )


# ── Update documents ──


@pytest.fixture
def film_autumn_sonata() -> dict[str, Any]:
    return {
        "actor_ss": ["Ingrid Bergman", "Liv Ullmann", "Lena Nyman", "Halvar Björk"],
        "desc": "A married daughter who longs for her mother's love is visited by the latter, a successful concert pianist.",
        "directed_by": ["Ingmar Bergman"],
        "genre": ["Drama", "Music"],
        "id": "tt0077711",
        "initial_release_date": "1978-10-08",
        "name": "Autumn Sonata",
    }


@pytest.fixture
def film_persona() -> dict[str, Any]:
    return {
        "actor_ss": ["Bibi Andersson", "Liv Ullmann", "Margaretha Krook"],
        "desc": "A nurse is put in charge of a mute actress and finds that their personas are melding together.",
        "directed_by": ["Ingmar Bergman"],
        "genre": ["Drama", "Thriller"],
        "id": "tt0060827",
        "initial_release_date": "1967-09-21",
        "name": "Persona",
    }


@pytest.fixture
def simple_search_response() -> dict[str, Any]:
    """Sample Solr JSON response from /select."""
    return {
        "responseHeader": {"status": 0, "QTime": 3, "params": {"q": "*"}},
        "response": {
            "numFound": 2,
            "start": 0,
            "docs": [
                {"id": "tt0077711", "name": "Autumn Sonata"},
                {"id": "tt0060827", "name": "Persona"},
            ],
        },
    }


@pytest.fixture(autouse=True)
def _reset_solrquery_logger() -> Iterator[None]:
    """Undo ``setup_logging()`` so handlers never outlive the test that installed them."""
    logger = logging.getLogger("solrquery")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
