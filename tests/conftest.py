"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_gbif_entry() -> dict:
    """First entry of a GBIF species search for 'Puma concolor'."""
    return {
        "key": 2435099,
        "canonicalName": "Puma concolor",
        "authorship": "(Linnaeus, 1771)",
        "taxonomicStatus": "ACCEPTED",
        "kingdom": "Animalia",
        "phylum": "Chordata",
        "class": "Mammalia",
        "order": "Carnivora",
        "family": "Felidae",
        "species": "Puma concolor",
    }
