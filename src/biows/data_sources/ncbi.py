"""
NCBI Entrez taxonomy client.

Two methods:
  1. summary — Chained lookup: taxonomy id → summary → nucleotide count → protein count
  2. links   — LinkOut resources for a taxonomy id
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any

from biows.config import get_settings
from biows.data_sources.base_client import BaseClient, ClientConfig
from biows.models.model_ncbi import LinkEntry, SpeciesSummary
from biows.utils.tree_query import xml_text

logger = logging.getLogger("biows.data_sources.ncbi")

# esummary DocSum Item name → SpeciesSummary field
_SUMMARY_ITEMS: dict[str, str] = {
    "Division": "division",
    "ScientificName": "scientific_name",
    "CommonName": "common_name",
}


def _to_int(text: str | None) -> int | None:
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


class NCBITaxonomyClient(BaseClient):
    """Client for the NCBI Entrez taxonomy, nucleotide and protein databases."""

    def __init__(
        self, base_url: str | None = None, config: ClientConfig | None = None
    ) -> None:
        super().__init__(config)
        self.base_url = base_url or get_settings().ncbi_url

    @property
    def _source_name(self) -> str:
        return "ncbi"

    # -- Public methods -------------------------------------------------------

    async def summary(self, term: str) -> tuple[bool, SpeciesSummary]:
        """Resolve *term* to a taxonomy id and collect its summary and sequence counts.

        Stages run strictly in order. When the id cannot be resolved the
        remaining stages are skipped and ``(False, SpeciesSummary())`` is
        returned. Later stages fail independently: a failed summary still
        lets the nucleotide and protein counts through, and vice versa.
        """
        taxon_id = await self._resolve_id(term)
        if not taxon_id:
            logger.info("No NCBI taxonomy id for %r", term)
            return False, SpeciesSummary()

        fields: dict[str, Any] = {"id": taxon_id}
        fields.update(await self._fetch_summary(taxon_id))

        nucleotide = await self._sequence_count("nucleotide", term)
        if nucleotide is not None:
            fields["nucleotide_count"] = nucleotide

        protein = await self._sequence_count("protein", term)
        if protein is not None:
            fields["protein_count"] = protein

        result = SpeciesSummary(**fields)
        return result.found, result

    async def links(self, taxon_id: int) -> list[LinkEntry]:
        """Return the LinkOut resources (URL and provider name) for *taxon_id*."""
        root = await self._get_xml(
            self.links_url(taxon_id),
            context=self._context("links", id=taxon_id),
        )
        if root is None:
            return []
        return self._parse_links(root)

    # -- URL builders ---------------------------------------------------------

    def search_url(self, db: str, term: str) -> str:
        return f"{self.base_url}esearch.fcgi?db={db}&term={self.plus_encode(term)}"

    def summary_url(self, taxon_id: int) -> str:
        return f"{self.base_url}esummary.fcgi?db=taxonomy&id={taxon_id}&retmode=xml"

    def links_url(self, taxon_id: int) -> str:
        return f"{self.base_url}elink.fcgi?dbfrom=taxonomy&id={taxon_id}&cmd=llinkslib"

    # -- Stages ---------------------------------------------------------------

    async def _resolve_id(self, term: str) -> int:
        root = await self._get_xml(
            self.search_url("taxonomy", term),
            context=self._context("resolve_id", term=term),
        )
        if root is None:
            return 0
        return _to_int(xml_text(root, "IdList/Id")) or 0

    async def _fetch_summary(self, taxon_id: int) -> dict[str, str]:
        root = await self._get_xml(
            self.summary_url(taxon_id),
            context=self._context("summary", id=taxon_id),
        )
        if root is None:
            return {}
        return self._parse_summary(root)

    async def _sequence_count(self, db: str, term: str) -> int | None:
        root = await self._get_xml(
            self.search_url(db, term),
            context=self._context(f"{db}_count", term=term),
        )
        if root is None:
            return None
        return _to_int(xml_text(root, "Count"))

    # -- Parsers --------------------------------------------------------------

    @staticmethod
    def _parse_summary(root: ET.Element) -> dict[str, str]:
        """Read the Division/ScientificName/CommonName items of the first DocSum."""
        fields: dict[str, str] = {}
        for item_name, field_name in _SUMMARY_ITEMS.items():
            value = xml_text(root, f"DocSum/Item[@Name='{item_name}']")
            if value is not None:
                fields[field_name] = value
        return fields

    @staticmethod
    def _parse_links(root: ET.Element) -> list[LinkEntry]:
        """One LinkEntry per ObjUrl; the URL and provider come from the same node."""
        entries: list[LinkEntry] = []
        for obj_url in root.iterfind(".//ObjUrl"):
            url = xml_text(obj_url, "Url")
            if not url:
                logger.debug("Skipping ObjUrl without Url")
                continue
            entries.append(
                LinkEntry(
                    url=url.strip(),
                    provider_name=(xml_text(obj_url, "Provider/Name") or "").strip(),
                )
            )
        return entries
