"""FiveFilters term extraction client."""

from __future__ import annotations

import logging
import re

from biows.config import get_settings
from biows.constants import DEFAULT_LIMIT
from biows.data_sources.base_client import BaseClient, ClientConfig

logger = logging.getLogger("biows.data_sources.fivefilters")

# The service separates terms with a literal backslash-n, not a newline.
_LINE_SEPARATOR = re.compile(r"\\n", re.IGNORECASE)


class FiveFiltersClient(BaseClient):
    """Client for the FiveFilters Term Extraction web service."""

    def __init__(
        self, base_url: str | None = None, config: ClientConfig | None = None
    ) -> None:
        super().__init__(config)
        self.base_url = base_url or get_settings().fivefilters_url

    @property
    def _source_name(self) -> str:
        return "fivefilters"

    async def extract_terms(self, text: str, limit: int = DEFAULT_LIMIT) -> list[str]:
        """Return up to *limit* significant words or phrases found in *text*."""
        if limit <= 0:
            return []
        body = await self._get_text(
            self.extract_url(text, limit),
            context=self._context("extract_terms", limit=limit),
        )
        if not body:
            return []
        return self.split_terms(body)[:limit]

    def extract_url(self, text: str, limit: int) -> str:
        return (
            f"{self.base_url}extract.php?text={self.plus_encode(text)}"
            f"&output=txt&max={limit}"
        )

    @staticmethod
    def split_terms(body: str) -> list[str]:
        """Split a raw service payload into one entry per line."""
        return _LINE_SEPARATOR.sub("\n", body).splitlines()
