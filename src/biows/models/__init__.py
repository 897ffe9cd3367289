"""Data models for BioWS."""

from biows.models.model_gbif import TaxonomicStatus, TaxonRecord
from biows.models.model_ncbi import LinkEntry, SpeciesSummary
from biows.models.model_pubmed import ArticleReference

__all__ = [
    "ArticleReference",
    "LinkEntry",
    "SpeciesSummary",
    "TaxonomicStatus",
    "TaxonRecord",
]
