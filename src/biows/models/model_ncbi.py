"""Pydantic models for NCBI Entrez taxonomy data."""

from pydantic import BaseModel


class SpeciesSummary(BaseModel):
    """Taxonomy summary plus sequence counts for one search term.

    ``id == 0`` means the term did not resolve to a taxonomy record.
    """

    id: int = 0
    scientific_name: str = ""
    common_name: str = ""
    division: str = ""
    nucleotide_count: int = 0
    protein_count: int = 0

    @property
    def found(self) -> bool:
        return self.id != 0


class LinkEntry(BaseModel):
    """External resource linked to a taxonomy record (Entrez LinkOut)."""

    url: str
    provider_name: str = ""
