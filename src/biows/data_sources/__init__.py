"""Provider clients."""

from biows.data_sources.fivefilters import FiveFiltersClient
from biows.data_sources.gbif import GBIFClient
from biows.data_sources.ncbi import NCBITaxonomyClient
from biows.data_sources.pubmed import PubMedClient
from biows.data_sources.wikipedia import WikipediaClient

__all__ = [
    "FiveFiltersClient",
    "GBIFClient",
    "NCBITaxonomyClient",
    "PubMedClient",
    "WikipediaClient",
]
