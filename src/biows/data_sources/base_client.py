"""
Base client for all external data source clients.

Provides: session management, a single GET transport that returns either
decoded text or raw bytes, structured logging, and graceful degradation.
Transport failures (connection errors, timeouts, HTTP errors, empty bodies)
and malformed payloads never raise out of a client operation; they collapse
into a "not found" result at the call site.
"""

from __future__ import annotations

import asyncio
import logging
import time
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

from biows.config import get_settings
from biows.utils.tree_query import PayloadParseError, parse_json, parse_xml

logger = logging.getLogger("biows.data_sources")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Transport settings shared by every client."""

    timeout_seconds: float = 30.0
    user_agent: str = ""

    @classmethod
    def from_settings(cls) -> "ClientConfig":
        settings = get_settings()
        return cls(
            timeout_seconds=settings.timeout_seconds,
            user_agent=settings.user_agent,
        )


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "gbif", "pubmed"
    method: str  # e.g. "search", "occurrence_count"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


# ---------------------------------------------------------------------------
# Partial result wrapper
# ---------------------------------------------------------------------------


class PartialResult(BaseModel):
    """
    Outcome of a single transport call.

    ``data`` holds the body (``str`` or ``bytes``) on success and ``None``
    on failure; ``errors`` explains why.  Callers only look at ``data``:
    "service unreachable" and "nothing there" are deliberately the same
    signal for the clients built on top.
    """

    data: Any = None
    is_complete: bool = True
    errors: list[str] = []
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.is_complete and self.data is not None


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for the GBIF, NCBI, Wikipedia, FiveFilters and PubMed clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_get_json()`, `_get_xml()` or `_get_text()` depending on the
    provider's response encoding.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig.from_settings()
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'gbif'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            headers = {"User-Agent": self.config.user_agent} if self.config.user_agent else None
            self._session = aiohttp.ClientSession(timeout=timeout, headers=headers)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    def _context(self, method: str, **params: Any) -> RequestContext:
        return RequestContext(source=self._source_name, method=method, params=params)

    # -- Core request --------------------------------------------------------

    async def _request(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        as_bytes: bool = False,
        context: RequestContext | None = None,
    ) -> PartialResult:
        """
        Make a single HTTP GET request.

        Parameters
        ----------
        url : str
            Full URL.  Providers build their query strings by hand, so
            ``params`` is usually empty.
        params : dict, optional
            Extra query string parameters.
        as_bytes : bool
            Return the raw body (for XML) instead of decoded text (for JSON
            and plain text).
        context : RequestContext, optional
            Logging context.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        start = time.monotonic()

        try:
            session = await self._get_session()

            logger.info("Request [%s.%s] url=%s", ctx.source, ctx.method, url)

            resp = await session.get(url, params=params)

            if resp.status >= 400:
                body = await resp.text()
                raise DataSourceError(
                    ctx.source,
                    f"HTTP {resp.status}: {body[:200]}",
                    status_code=resp.status,
                )

            data = await resp.read() if as_bytes else await resp.text()
            if not data:
                raise DataSourceError(ctx.source, "Empty response body")

        except DataSourceError as e:
            return self._failed(ctx, e, start)

        except asyncio.TimeoutError:
            elapsed = time.monotonic() - start
            return self._failed(
                ctx, DataSourceError(ctx.source, f"Timeout after {elapsed:.1f}s"), start
            )

        except aiohttp.ClientError as e:
            return self._failed(
                ctx, DataSourceError(ctx.source, f"Connection error: {e}"), start
            )

        except UnicodeDecodeError as e:
            return self._failed(
                ctx, DataSourceError(ctx.source, f"Undecodable body: {e}"), start
            )

        elapsed = time.monotonic() - start
        logger.info(
            "Success [%s.%s] elapsed=%.2fs bytes=%d",
            ctx.source,
            ctx.method,
            elapsed,
            len(data),
        )
        return PartialResult(data=data, elapsed_seconds=elapsed)

    @staticmethod
    def _failed(
        ctx: RequestContext, error: DataSourceError, start: float
    ) -> PartialResult:
        elapsed = time.monotonic() - start
        logger.warning(
            "Request failed [%s.%s] after %.2fs: %s",
            ctx.source,
            ctx.method,
            elapsed,
            error,
        )
        return PartialResult(
            data=None,
            is_complete=False,
            errors=[str(error)],
            elapsed_seconds=elapsed,
        )

    # -- Convenience methods for subclasses ----------------------------------

    async def _get_text(
        self, url: str, *, context: RequestContext | None = None
    ) -> str | None:
        """GET a plain-text body (FiveFilters)."""
        result = await self._request(url, context=context)
        return result.data if result.ok else None

    async def _get_json(
        self, url: str, *, context: RequestContext | None = None
    ) -> Any | None:
        """GET and parse a JSON body (GBIF, Wikipedia)."""
        result = await self._request(url, context=context)
        if not result.ok:
            return None
        try:
            return parse_json(result.data)
        except PayloadParseError as e:
            self._log_parse_error(url, e, context)
            return None

    async def _get_xml(
        self, url: str, *, context: RequestContext | None = None
    ) -> ET.Element | None:
        """GET and parse an XML body (NCBI Entrez, PubMed)."""
        result = await self._request(url, as_bytes=True, context=context)
        if not result.ok:
            return None
        try:
            return parse_xml(result.data)
        except PayloadParseError as e:
            self._log_parse_error(url, e, context)
            return None

    def _log_parse_error(
        self, url: str, error: Exception, context: RequestContext | None
    ) -> None:
        method = context.method if context else "unknown"
        logger.warning(
            "Malformed payload [%s.%s] url=%s: %s", self._source_name, method, url, error
        )

    # -- Query string helpers ------------------------------------------------

    @staticmethod
    def plus_encode(text: str) -> str:
        """Replace spaces with '+' for use in a query string value."""
        return text.replace(" ", "+")
