"""Tests for notemark.services.metadata — HTML extraction and page fetching."""

import asyncio

import httpx
import pytest

from notemark.config import DEFAULT_USER_AGENT
from notemark.services.metadata import Metadata, MetadataService, extract_metadata

URL = "https://example.com/article"


class TestExtractMetadata:
    def test_title_and_description(self):
        html = '<title>Example</title><meta name="description" content="Hi">'
        assert extract_metadata(html, URL) == Metadata("Example", "Hi")

    def test_no_title_falls_back_to_url(self):
        assert extract_metadata("<html><body>hi</body></html>", URL) == Metadata(URL, None)

    def test_empty_input(self):
        assert extract_metadata("", URL) == Metadata(URL, None)

    def test_unterminated_title(self):
        result = extract_metadata("<html><head><title>Broken", URL)
        assert result.title == URL
        assert result.description is None

    def test_unterminated_meta_tag(self):
        html = '<title>Ok</title><meta name="description" content="cut'
        assert extract_metadata(html, URL) == Metadata("Ok", None)

    def test_title_is_trimmed_and_case_insensitive(self):
        html = '<TITLE lang="en">\n   Spaced Out  \n</TITLE>'
        assert extract_metadata(html, URL).title == "Spaced Out"

    def test_blank_title_falls_back_to_url(self):
        assert extract_metadata("<title>   </title>", URL).title == URL

    def test_first_title_wins(self):
        html = "<title>First</title><svg><title>Second</title></svg>"
        assert extract_metadata(html, URL).title == "First"

    def test_nested_markup_in_title_is_not_understood(self):
        html = "<title><b>Bold</b></title>"
        assert extract_metadata(html, URL).title == URL

    def test_content_before_name(self):
        html = "<meta content='Reversed' name='description'>"
        assert extract_metadata(html, URL).description == "Reversed"

    def test_description_is_trimmed(self):
        html = '<META NAME="Description" CONTENT="  padded  " />'
        assert extract_metadata(html, URL).description == "padded"

    def test_other_meta_tags_are_ignored(self):
        html = (
            '<meta name="keywords" content="a, b">'
            '<meta property="og:description" content="og">'
        )
        assert extract_metadata(html, URL).description is None

    def test_empty_content_is_absent(self):
        html = '<meta name="description" content="">'
        assert extract_metadata(html, URL).description is None

    def test_full_document(self):
        html = """<!doctype html>
        <html>
          <head>
            <meta charset="utf-8">
            <title>Python Docs</title>
            <meta name="viewport" content="width=device-width">
            <meta name="description" content="Official documentation">
          </head>
          <body><p>Hello</p></body>
        </html>"""
        assert extract_metadata(html, URL) == Metadata(
            "Python Docs", "Official documentation"
        )


def _service(handler):
    return MetadataService(timeout=5.0, transport=httpx.MockTransport(handler))


class TestMetadataService:
    def test_extracts_from_fetched_page(self):
        seen = {}

        def handler(request):
            seen["user_agent"] = request.headers["User-Agent"]
            seen["url"] = str(request.url)
            return httpx.Response(
                200,
                text='<title>Fetched</title><meta name="description" content="Desc">',
            )

        result = asyncio.run(_service(handler).extract(URL))

        assert result == Metadata("Fetched", "Desc")
        assert seen == {"user_agent": DEFAULT_USER_AGENT, "url": URL}

    def test_follows_redirects(self):
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "https://example.com/new"})
            return httpx.Response(200, text="<title>Moved</title>")

        result = asyncio.run(_service(handler).extract("https://example.com/old"))
        assert result.title == "Moved"

    @pytest.mark.parametrize("status_code", [404, 500, 503])
    def test_error_status_falls_back_to_url(self, status_code):
        def handler(request):
            return httpx.Response(status_code, text="<title>Error page</title>")

        assert asyncio.run(_service(handler).extract(URL)) == Metadata(URL, None)

    def test_transport_error_falls_back_to_url(self):
        def handler(request):
            raise httpx.ConnectError("name resolution failed", request=request)

        assert asyncio.run(_service(handler).extract(URL)) == Metadata(URL, None)

    def test_timeout_falls_back_to_url(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        assert asyncio.run(_service(handler).extract(URL)) == Metadata(URL, None)
