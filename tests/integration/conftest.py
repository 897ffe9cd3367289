"""Shared fixtures for integration tests (live provider services)."""

import pytest

from biows.data_sources.fivefilters import FiveFiltersClient
from biows.data_sources.gbif import GBIFClient
from biows.data_sources.ncbi import NCBITaxonomyClient
from biows.data_sources.pubmed import PubMedClient
from biows.data_sources.wikipedia import WikipediaClient


@pytest.fixture
async def gbif_client():
    """Create and tear down a GBIFClient."""
    c = GBIFClient()
    yield c
    await c.close()


@pytest.fixture
async def ncbi_client():
    """Create and tear down an NCBITaxonomyClient."""
    c = NCBITaxonomyClient()
    yield c
    await c.close()


@pytest.fixture
async def wikipedia_client():
    """Create and tear down a WikipediaClient."""
    c = WikipediaClient()
    yield c
    await c.close()


@pytest.fixture
async def fivefilters_client():
    """Create and tear down a FiveFiltersClient."""
    c = FiveFiltersClient()
    yield c
    await c.close()


@pytest.fixture
async def pubmed_client():
    """Create and tear down a PubMedClient."""
    c = PubMedClient()
    yield c
    await c.close()
