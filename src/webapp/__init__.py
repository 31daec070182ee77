# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Awaitable, Callable
from typing import Final

import logging
import math

import aiohttp.web
import multidict

from docmodel import DocumentDefaults, DocumentModel, ValidationError
from docmodel.errors import DEFAULT_HEADING
from dom import Element, Page

LOGGER = logging.getLogger(__name__)

STATUS_REASONS: Final[dict[int, str]] = {
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Request Entity Too Large",
    414: "Request-URI Too Long",
    415: "Unsupported Media Type",
    416: "Requested Range Not Satisfiable",
    417: "Expectation Failed",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
}

_KNOWN_PROTOCOLS = ("HTTP/1.0", "HTTP/1.1")

Handler = Callable[[aiohttp.web.Request], Awaitable[aiohttp.web.StreamResponse]]


def reason_phrase(code: int) -> str:
    return STATUS_REASONS.get(code, "")


def _numeric(code: int | str | None) -> float | None:
    # Signed, decimal and exponent forms count as numeric; blanks do not.
    if code is None or isinstance(code, bool):
        return None

    try:
        number = float(str(code).strip())
    except ValueError:
        return None

    return number if math.isfinite(number) else None


def status_line(
    code: int | str | None = 200,
    text: str = "",
    protocol: str | None = None,
    *,
    cgi: bool = False,
) -> str:
    number = _numeric(code)
    if number is None:
        number, text = 500, STATUS_REASONS[500]

    code = int(number)
    text = text or reason_phrase(code)

    if cgi:
        return f"Status: {code} {text}"
    if protocol in _KNOWN_PROTOCOLS:
        return f"{protocol} {code} {text}"

    return f"HTTP/1.1 {code} {text}"


def error_document(message: str, heading: str = DEFAULT_HEADING) -> Page:
    document = DocumentModel(DocumentDefaults(tab=""))
    document.set_title("Error")

    return Page(document, Element("h1", heading), Element("p", message))


class ErrorPage(aiohttp.web.Response):
    def __init__(
        self,
        message: str,
        status: int = 500,
        heading: str = DEFAULT_HEADING,
    ) -> None:
        if status not in STATUS_REASONS:
            status = 500

        super().__init__(
            text=error_document(message, heading).html,
            status=status,
            reason=reason_phrase(status),
            content_type="text/html",
            charset="utf-8",
            headers=multidict.CIMultiDict(
                {"Cache-Control": "must-revalidate, no-cache, no-store, private"},
            ),
        )


@aiohttp.web.middleware
async def validation_errors(
    request: aiohttp.web.Request,
    handler: Handler,
) -> aiohttp.web.StreamResponse:
    try:
        return await handler(request)
    except ValidationError as error:
        LOGGER.exception(
            "Document validation failed",
            extra={"path": request.path, "status": error.status},
        )
        return ErrorPage(error.message, status=error.status, heading=error.heading)
