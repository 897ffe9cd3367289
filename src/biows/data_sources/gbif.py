"""
GBIF (Global Biodiversity Information Facility) client.

Two methods:
  1. search           — Backbone name search, first match as a TaxonRecord
  2. occurrence_count — Number of occurrence records for a taxon key
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from biows.config import get_settings
from biows.data_sources.base_client import BaseClient, ClientConfig
from biows.models.model_gbif import TaxonomicStatus, TaxonRecord
from biows.utils.tree_query import find_path

logger = logging.getLogger("biows.data_sources.gbif")

# GBIF result field → TaxonRecord field
_RANK_FIELDS: dict[str, str] = {
    "kingdom": "kingdom",
    "phylum": "phylum",
    "class": "class_rank",
    "order": "order",
    "family": "family",
}


class GBIFClient(BaseClient):
    """Client for the GBIF species and occurrence APIs."""

    def __init__(
        self, base_url: str | None = None, config: ClientConfig | None = None
    ) -> None:
        super().__init__(config)
        self.base_url = base_url or get_settings().gbif_url

    @property
    def _source_name(self) -> str:
        return "gbif"

    # -- Public methods -------------------------------------------------------

    async def search(self, name: str) -> tuple[bool, TaxonRecord]:
        """Search the backbone for *name*.

        Returns ``(True, record)`` built from the first match, or
        ``(False, TaxonRecord())`` when there is no match or the request fails.
        """
        data = await self._get_json(
            self.search_url(name), context=self._context("search", name=name)
        )
        results = find_path(data, "results")
        if not isinstance(results, list) or not results:
            logger.info("No GBIF match for %r", name)
            return False, TaxonRecord()

        first = results[0]
        if not isinstance(first, dict):
            return False, TaxonRecord()
        try:
            record = self._parse_taxon(first)
        except ValidationError as e:
            logger.warning("Malformed GBIF entry for %r: %s", name, e)
            return False, TaxonRecord()
        return True, record

    async def occurrence_count(self, key: int) -> int:
        """Return the number of occurrences recorded for taxon *key*, or -1."""
        data = await self._get_json(
            self.count_url(key), context=self._context("occurrence_count", key=key)
        )
        count = find_path(data, "count")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            return -1
        return count

    # -- URL builders ---------------------------------------------------------

    def search_url(self, name: str) -> str:
        return f"{self.base_url}/species/?name={name.replace(' ', '%20')}"

    def count_url(self, key: int) -> str:
        return f"{self.base_url}/occurrence/search?taxonKey={key}&limit=0"

    # -- Private helpers ------------------------------------------------------

    @staticmethod
    def _parse_taxon(raw: dict[str, Any]) -> TaxonRecord:
        """Project one GBIF name-usage entry onto a TaxonRecord."""
        fields: dict[str, Any] = {
            "key": raw.get("key"),
            "scientific_name": raw.get("canonicalName"),
            "authorship": raw.get("authorship"),
        }
        for gbif_name, field_name in _RANK_FIELDS.items():
            fields[field_name] = raw.get(gbif_name)

        token = raw.get("taxonomicStatus")
        if isinstance(token, str):
            status = TaxonomicStatus.from_token(token)
            fields["status"] = status
            if status is not TaxonomicStatus.ACCEPTED:
                fields["valid_name"] = raw.get("species")

        return TaxonRecord(**fields)
