"""
PubMed API client.

One public method, two requests:
  1. esearch — PMIDs matching a query, most relevant first
  2. efetch  — Full records for those PMIDs, reduced to title + DOI
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from biows.config import get_settings
from biows.constants import DEFAULT_LIMIT
from biows.data_sources.base_client import BaseClient, ClientConfig
from biows.models.model_pubmed import ArticleReference
from biows.utils.tree_query import xml_text, xml_texts

logger = logging.getLogger("biows.data_sources.pubmed")


class PubMedClient(BaseClient):
    """Client for querying PubMed through NCBI E-utilities."""

    def __init__(
        self, base_url: str | None = None, config: ClientConfig | None = None
    ) -> None:
        super().__init__(config)
        self.base_url = base_url or get_settings().pubmed_url

    @property
    def _source_name(self) -> str:
        return "pubmed"

    async def search(
        self, term: str, limit: int = DEFAULT_LIMIT
    ) -> list[ArticleReference]:
        """Search PubMed and return title/DOI pairs for up to *limit* articles."""
        if limit <= 0:
            return []

        pmids = await self.search_ids(term, limit)
        if not pmids:
            logger.info("No PubMed ids for %r", term)
            return []

        root = await self._get_xml(
            self.fetch_url(pmids),
            context=self._context("fetch", ids=len(pmids)),
        )
        if root is None:
            return []
        return self._parse_references(root)

    async def search_ids(self, term: str, limit: int = DEFAULT_LIMIT) -> list[str]:
        """Return the PMIDs for *term*, ordered by relevance."""
        root = await self._get_xml(
            self.search_url(term, limit),
            context=self._context("search", term=term, limit=limit),
        )
        if root is None:
            return []
        return [pmid.strip() for pmid in xml_texts(root, "IdList/Id") if pmid.strip()]

    # -- URL builders ---------------------------------------------------------

    def search_url(self, term: str, limit: int) -> str:
        return (
            f"{self.base_url}esearch.fcgi?db=pubmed&retmax={limit}"
            f"&sort=relevance&term={self.plus_encode(term)}"
        )

    def fetch_url(self, pmids: list[str]) -> str:
        return f"{self.base_url}efetch.fcgi?db=pubmed&id={','.join(pmids)}&retmode=xml"

    # -- Parsers --------------------------------------------------------------

    @staticmethod
    def _parse_references(root: ET.Element) -> list[ArticleReference]:
        """Read title and DOI from each PubmedArticle; articles missing either are dropped."""
        references: list[ArticleReference] = []
        for article_elem in root.iterfind(".//PubmedArticle"):
            title = xml_text(article_elem, ".//Article/ArticleTitle")
            doi = xml_text(
                article_elem, ".//PubmedData/ArticleIdList/ArticleId[@IdType='doi']"
            )
            if not title or not doi:
                logger.debug("Skipping PubMed article without title or DOI")
                continue
            references.append(ArticleReference(title=title.strip(), doi=doi.strip()))
        return references
