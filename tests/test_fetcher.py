"""
Tests for PageFetcher and failure classification
"""

import socket
from unittest.mock import MagicMock

import pytest
import requests

from sitecrawler.crawl.config import CrawlConfig
from sitecrawler.crawl.errors import FetchErrorKind, FetchFailure
from sitecrawler.crawl.fetcher import PageFetcher


URL = "https://example.com/"


def make_response(status_code=200, content=b"<html></html>", content_type="text/html; charset=utf-8",
                  encoding="utf-8"):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.headers = {"Content-Type": content_type}
    response.encoding = encoding
    return response


class TestPageFetcher:
    """Test a single fetch against a mocked session"""

    def setup_method(self):
        self.session = requests.Session()
        self.session.get = MagicMock()
        self.fetcher = PageFetcher(CrawlConfig(), session=self.session)

    def test_header_profile_applied(self):
        for header in ("User-Agent", "Accept", "Accept-Language", "Accept-Encoding",
                       "DNT", "Connection", "Upgrade-Insecure-Requests"):
            assert header in self.session.headers
        assert self.session.headers["DNT"] == "1"

    def test_success_uses_crawl_timeout(self):
        self.session.get.return_value = make_response(200, b"<html>ok</html>")

        response = self.fetcher.fetch(URL)

        assert response.status_code == 200
        assert response.content == b"<html>ok</html>"
        self.session.get.assert_called_once_with(URL, timeout=10.0)

    @pytest.mark.parametrize("status_code", [301, 403, 404, 499])
    def test_statuses_below_500_are_successful_fetches(self, status_code):
        self.session.get.return_value = make_response(status_code)
        assert self.fetcher.fetch(URL).status_code == status_code

    def test_server_error(self):
        self.session.get.return_value = make_response(503)

        with pytest.raises(FetchFailure) as exc_info:
            self.fetcher.fetch(URL)

        assert exc_info.value.kind is FetchErrorKind.SERVER_ERROR
        assert exc_info.value.status_code == 503

    @pytest.mark.parametrize("status_code, kind", [
        (403, FetchErrorKind.FORBIDDEN),
        (404, FetchErrorKind.NOT_FOUND),
        (418, FetchErrorKind.OTHER),
    ])
    def test_strict_mode_rejects_client_errors(self, status_code, kind):
        self.session.get.return_value = make_response(status_code)

        with pytest.raises(FetchFailure) as exc_info:
            self.fetcher.fetch(URL, strict=True)

        assert exc_info.value.kind is kind
        assert exc_info.value.status_code == status_code

    def test_domain_unresolved(self):
        self.session.get.side_effect = requests.exceptions.ConnectionError(
            socket.gaierror(-2, "Name or service not known")
        )

        with pytest.raises(FetchFailure) as exc_info:
            self.fetcher.fetch(URL)

        assert exc_info.value.kind is FetchErrorKind.DOMAIN_UNRESOLVED
        assert exc_info.value.status_code == 0

    @pytest.mark.parametrize("exc", [
        requests.exceptions.ConnectTimeout("connect timed out"),
        requests.exceptions.ReadTimeout("read timed out"),
    ])
    def test_timeout(self, exc):
        self.session.get.side_effect = exc

        with pytest.raises(FetchFailure) as exc_info:
            self.fetcher.fetch(URL)

        assert exc_info.value.kind is FetchErrorKind.TIMEOUT
        assert exc_info.value.message == "Connection timed out"

    def test_other_transport_error(self):
        self.session.get.side_effect = requests.exceptions.SSLError("certificate verify failed")

        with pytest.raises(FetchFailure) as exc_info:
            self.fetcher.fetch(URL)

        assert exc_info.value.kind is FetchErrorKind.OTHER
        assert "certificate verify failed" in exc_info.value.message

    def test_single_attempt_only(self):
        self.session.get.side_effect = requests.exceptions.ConnectionError("reset")

        with pytest.raises(FetchFailure):
            self.fetcher.fetch(URL)

        assert self.session.get.call_count == 1

    def test_declared_charset_is_passed_on(self):
        self.session.get.return_value = make_response(content_type="text/html; charset=ISO-8859-1",
                                                      encoding="ISO-8859-1")
        assert self.fetcher.fetch(URL).encoding == "ISO-8859-1"

    def test_missing_charset_leaves_encoding_unset(self):
        # requests falls back to ISO-8859-1 for text/* without a charset
        self.session.get.return_value = make_response(content_type="text/html", encoding="ISO-8859-1")
        assert self.fetcher.fetch(URL).encoding is None

    def test_hostless_address_fails_without_network(self):
        fetcher = PageFetcher(CrawlConfig())

        with pytest.raises(FetchFailure) as exc_info:
            fetcher.fetch("mailto:someone@example.com")
        fetcher.close()

        assert exc_info.value.kind is FetchErrorKind.OTHER
        assert exc_info.value.status_code == 0
