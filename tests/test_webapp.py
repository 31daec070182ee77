import asyncio
import logging

import aiohttp.web
import pytest
from aiohttp.test_utils import make_mocked_request

from docmodel import DocumentModel, ValidationError
from webapp import STATUS_REASONS, ErrorPage, error_document, status_line, validation_errors


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((404,), "HTTP/1.1 404 Not Found"),
        ((200, "", "HTTP/1.0"), "HTTP/1.0 200 OK"),
        ((302, "Elsewhere", "HTTP/1.1"), "HTTP/1.1 302 Elsewhere"),
        ((503, "", "HTTP/2"), "HTTP/1.1 503 Service Unavailable"),
        (("abc",), "HTTP/1.1 500 Internal Server Error"),
        (("",), "HTTP/1.1 500 Internal Server Error"),
        ((None,), "HTTP/1.1 500 Internal Server Error"),
        (("301",), "HTTP/1.1 301 Moved Permanently"),
        (("404.0",), "HTTP/1.1 404 Not Found"),
        ((" 302 ",), "HTTP/1.1 302 Found"),
        (("-1",), "HTTP/1.1 -1 "),
        (("1e2", "Custom"), "HTTP/1.1 100 Custom"),
        (("nan",), "HTTP/1.1 500 Internal Server Error"),
    ],
)
def test_status_line(args, expected):
    assert status_line(*args) == expected


def test_cgi_status_line():
    assert status_line(403, cgi=True) == "Status: 403 Forbidden"


def test_reason_table_covers_common_codes():
    assert STATUS_REASONS[200] == "OK"
    assert STATUS_REASONS[417] == "Expectation Failed"
    assert STATUS_REASONS[505] == "HTTP Version Not Supported"
    assert 418 not in STATUS_REASONS


def test_error_document():
    page = error_document("can't append <x>", "Broken")
    markup = page.html

    assert "<title>Error</title>" in markup
    assert "<h1>Broken</h1>" in markup
    assert "<p>can't append &lt;x&gt;</p>" in markup


def test_error_page_response():
    response = ErrorPage("Missing container", status=404, heading="Nope")

    assert response.status == 404
    assert response.reason == "Not Found"
    assert response.content_type == "text/html"
    assert response.headers["Cache-Control"].startswith("must-revalidate")
    assert "<h1>Nope</h1>" in response.text
    assert "<p>Missing container</p>" in response.text


def test_error_page_falls_back_to_500():
    response = ErrorPage("Odd", status=299)
    assert response.status == 500
    assert response.reason == "Internal Server Error"


def test_middleware_converts_validation_errors(caplog):
    async def handler(_request):
        DocumentModel().append("missing", "x")
        return aiohttp.web.Response(text="unreachable")

    request = make_mocked_request("GET", "/page")

    with caplog.at_level(logging.ERROR, logger="webapp"):
        response = asyncio.run(validation_errors(request, handler))

    assert response.status == 500
    assert "An Error Was Encountered" in response.text
    assert "missing" in response.text
    assert any(record.getMessage() == "Document validation failed" for record in caplog.records)


def test_middleware_uses_error_status():
    async def handler(_request):
        raise ValidationError("gone", status=410, heading="Gone away")

    response = asyncio.run(validation_errors(make_mocked_request("GET", "/"), handler))

    assert response.status == 410
    assert "<h1>Gone away</h1>" in response.text


def test_middleware_passes_responses_through():
    async def handler(_request):
        return aiohttp.web.Response(text="fine")

    response = asyncio.run(validation_errors(make_mocked_request("GET", "/"), handler))
    assert response.text == "fine"
