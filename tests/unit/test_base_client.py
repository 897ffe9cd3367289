"""Unit tests for base_client module."""

import asyncio
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from biows.data_sources.base_client import (
    BaseClient,
    ClientConfig,
    DataSourceError,
    PartialResult,
)

from stubs import failed, ok


class ConcreteTestClient(BaseClient):
    """Concrete implementation of BaseClient for testing."""

    @property
    def _source_name(self) -> str:
        return "test_client"


def _mock_session(resp=None, side_effect=None) -> AsyncMock:
    session = AsyncMock()
    session.get = AsyncMock(return_value=resp, side_effect=side_effect)
    return session


def _mock_response(status: int = 200, text: str = "", body: bytes = b"") -> AsyncMock:
    resp = AsyncMock()
    resp.status = status
    resp.text = AsyncMock(return_value=text)
    resp.read = AsyncMock(return_value=body)
    return resp


@pytest.mark.asyncio
class TestBaseClient:
    """Unit tests for BaseClient session lifecycle (no network calls)."""

    async def test_client_context_manager(self):
        """Test that client can be used as async context manager."""
        async with ConcreteTestClient(ClientConfig()) as client:
            assert client._session is None  # Session created lazily
            session = await client._get_session()

            assert session is not None
            assert not session.closed

        # Session should be closed after exiting context
        assert client._session.closed

    async def test_session_reuse(self):
        """Test that session is reused across requests."""
        client = ConcreteTestClient(ClientConfig())

        session1 = await client._get_session()
        session2 = await client._get_session()

        assert session1 is session2
        await client.close()

    async def test_user_agent_header_is_sent(self):
        """Test that the configured User-Agent becomes a session default header."""
        client = ConcreteTestClient(ClientConfig(user_agent="biows-test/1.0"))

        session = await client._get_session()

        assert session.headers["User-Agent"] == "biows-test/1.0"
        await client.close()


def test_default_config_comes_from_settings():
    """Test that a client without explicit config picks up Settings values."""
    client = ConcreteTestClient()

    assert client.config.timeout_seconds > 0
    assert client.config.user_agent


@pytest.mark.asyncio
class TestRequest:
    """Unit tests for _request failure collapsing."""

    async def test_returns_text_on_success(self):
        client = ConcreteTestClient(ClientConfig())
        session = _mock_session(_mock_response(text='{"count": 1}'))

        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            result = await client._request("https://example.com/api")

        assert result.ok
        assert result.data == '{"count": 1}'
        session.get.assert_called_once_with("https://example.com/api", params=None)

    async def test_returns_bytes_when_requested(self):
        client = ConcreteTestClient(ClientConfig())
        session = _mock_session(_mock_response(body=b"<root/>"))

        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            result = await client._request("https://example.com/xml", as_bytes=True)

        assert result.data == b"<root/>"

    async def test_http_error_is_a_failed_result(self):
        """Test that a 4xx/5xx response degrades to an incomplete result, not an exception."""
        client = ConcreteTestClient(ClientConfig())
        session = _mock_session(_mock_response(status=404, text="Not Found"))

        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            result = await client._request("https://example.com/missing")

        assert not result.ok
        assert result.data is None
        assert "HTTP 404" in result.errors[0]
        assert "[test_client]" in result.errors[0]

    async def test_empty_body_is_a_failed_result(self):
        client = ConcreteTestClient(ClientConfig())
        session = _mock_session(_mock_response(text=""))

        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            result = await client._request("https://example.com/empty")

        assert not result.ok
        assert "Empty response body" in result.errors[0]

    async def test_timeout_is_a_failed_result(self):
        client = ConcreteTestClient(ClientConfig())
        session = _mock_session(side_effect=asyncio.TimeoutError())

        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            result = await client._request("https://example.com/slow")

        assert not result.ok
        assert "Timeout" in result.errors[0]

    async def test_connection_error_is_a_failed_result(self):
        client = ConcreteTestClient(ClientConfig())
        session = _mock_session(side_effect=aiohttp.ClientConnectionError("refused"))

        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            result = await client._request("https://example.com/down")

        assert not result.ok
        assert "Connection error" in result.errors[0]

    async def test_undecodable_body_is_a_failed_result(self):
        """Test that a body invalid in its declared charset degrades to a failed result."""
        client = ConcreteTestClient(ClientConfig())
        resp = _mock_response()
        resp.text = AsyncMock(
            side_effect=UnicodeDecodeError(
                "utf-8", b'{"count": 4\xff2}', 11, 12, "invalid start byte"
            )
        )
        session = _mock_session(resp)

        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            result = await client._request("https://example.com/latin1")

        assert not result.ok
        assert result.data is None
        assert "Undecodable body" in result.errors[0]

    async def test_failure_is_logged(self, caplog):
        client = ConcreteTestClient(ClientConfig())
        session = _mock_session(side_effect=aiohttp.ClientConnectionError("refused"))

        with patch.object(
            client, "_get_session", new_callable=AsyncMock, return_value=session
        ):
            with caplog.at_level("WARNING", logger="biows.data_sources"):
                await client._request("https://example.com/down")

        assert "Request failed [test_client.unknown]" in caplog.text


@pytest.mark.asyncio
class TestParsedGetters:
    """Unit tests for _get_json / _get_xml / _get_text."""

    async def test_get_json_parses_body(self):
        client = ConcreteTestClient(ClientConfig())
        with patch.object(client, "_request", new=AsyncMock(return_value=ok({"a": [1]}))):
            assert await client._get_json("https://example.com") == {"a": [1]}

    async def test_get_json_malformed_returns_none(self):
        client = ConcreteTestClient(ClientConfig())
        with patch.object(client, "_request", new=AsyncMock(return_value=ok("{not json"))):
            assert await client._get_json("https://example.com") is None

    async def test_get_json_failure_returns_none(self):
        client = ConcreteTestClient(ClientConfig())
        with patch.object(client, "_request", new=AsyncMock(return_value=failed())):
            assert await client._get_json("https://example.com") is None

    async def test_get_xml_requests_bytes(self):
        client = ConcreteTestClient(ClientConfig())
        mock_request = AsyncMock(return_value=ok(b"<eSearchResult><Count>3</Count></eSearchResult>"))
        with patch.object(client, "_request", new=mock_request):
            root = await client._get_xml("https://example.com")

        assert root.tag == "eSearchResult"
        assert mock_request.call_args.kwargs["as_bytes"] is True

    async def test_get_xml_malformed_returns_none(self):
        client = ConcreteTestClient(ClientConfig())
        with patch.object(client, "_request", new=AsyncMock(return_value=ok(b"<unclosed"))):
            assert await client._get_xml("https://example.com") is None

    async def test_get_text_failure_returns_none(self):
        client = ConcreteTestClient(ClientConfig())
        with patch.object(client, "_request", new=AsyncMock(return_value=failed())):
            assert await client._get_text("https://example.com") is None


class TestPartialResult:
    def test_ok_requires_data(self):
        assert PartialResult(data="x").ok
        assert not PartialResult(data=None).ok
        assert not PartialResult(data="x", is_complete=False).ok


class TestDataSourceError:
    """Tests for DataSourceError."""

    def test_error_message_format(self):
        """Test error message includes source."""
        error = DataSourceError("pubmed", "Connection failed")
        assert "[pubmed]" in str(error)
        assert "Connection failed" in str(error)

    def test_error_with_status_code(self):
        """Test error can include status code."""
        error = DataSourceError("api", "Not found", status_code=404)
        assert error.source == "api"
        assert error.status_code == 404


def test_plus_encode():
    assert BaseClient.plus_encode("Puma concolor") == "Puma+concolor"
