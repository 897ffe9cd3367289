"""
Wikipedia REST client.

Two methods, both resolving redirects first:
  1. snippet — Plain-text extract of the page summary
  2. images  — Titles of JPEG images listed in the page's media list
"""

from __future__ import annotations

import logging
from typing import Any

from biows.config import get_settings
from biows.constants import DEFAULT_LIMIT, WIKIPEDIA_IMAGE_EXTENSION
from biows.data_sources.base_client import BaseClient, ClientConfig
from biows.utils.tree_query import find_path

logger = logging.getLogger("biows.data_sources.wikipedia")


class WikipediaClient(BaseClient):
    """Client for the Wikipedia action API (redirects) and REST API (summary, media)."""

    def __init__(
        self,
        summary_url: str | None = None,
        media_url: str | None = None,
        redirect_url: str | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        super().__init__(config)
        settings = get_settings()
        self.summary_url = summary_url or settings.wikipedia_summary_url
        self.media_url = media_url or settings.wikipedia_media_url
        self.redirect_url = redirect_url or settings.wikipedia_redirect_url

    @property
    def _source_name(self) -> str:
        return "wikipedia"

    # -- Public methods -------------------------------------------------------

    async def snippet(self, term: str) -> str:
        """Return the summary extract for *term*, or "" if there is none."""
        title = await self.resolve_title(term)
        data = await self._get_json(
            self.summary_url + self.title_segment(title),
            context=self._context("snippet", title=title),
        )
        extract = find_path(data, "extract")
        return extract if isinstance(extract, str) else ""

    async def images(self, term: str, limit: int = DEFAULT_LIMIT) -> list[str]:
        """Return up to *limit* ``.jpg`` image titles from the media list, in page order."""
        if limit <= 0:
            return []
        title = await self.resolve_title(term)
        data = await self._get_json(
            self.media_url + self.title_segment(title),
            context=self._context("images", title=title, limit=limit),
        )
        items = find_path(data, "items")
        if not isinstance(items, list):
            return []
        return self._select_images(items, limit)

    async def resolve_title(self, term: str) -> str:
        """Follow a Wikipedia redirect for *term*; fall back to *term* itself."""
        data = await self._get_json(
            f"{self.redirect_url}{self.plus_encode(term)}&redirects&format=json",
            context=self._context("resolve_title", term=term),
        )
        target = find_path(data, "query.redirects[0].to")
        if isinstance(target, str) and target:
            logger.debug("Redirect %r -> %r", term, target)
            return target
        return term

    # -- Private helpers ------------------------------------------------------

    @staticmethod
    def title_segment(title: str) -> str:
        """Page title as a REST path segment."""
        return title.replace(" ", "_").replace("/", "%2F")

    @staticmethod
    def _select_images(items: list[Any], limit: int) -> list[str]:
        candidates: list[str] = []
        for item in items:
            title = find_path(item, "title")
            if not isinstance(title, str):
                continue
            if title.lower().endswith(WIKIPEDIA_IMAGE_EXTENSION):
                candidates.append(title)
                if len(candidates) >= limit:
                    break
        return candidates
