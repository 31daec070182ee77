# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Sequence

import argparse
import dataclasses
import logging
import sys

from dotenv import find_dotenv, load_dotenv

from docmodel import DocumentDefaults, DocumentModel, ValidationError
from docmodel.logger import install
from dom import Page


def build_parser(defaults: DocumentDefaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docmodel", description="Render an HTML page skeleton.")
    parser.add_argument("--doctype", default=defaults.doctype)
    parser.add_argument("--charset", default=defaults.charset)
    parser.add_argument("--language", default=defaults.language)
    parser.add_argument("--direction", default=defaults.direction)
    parser.add_argument("--separator", default=defaults.separator)
    parser.add_argument("--eol", default=defaults.eol, help="unix, mac, win or a literal string")
    parser.add_argument("--title", action="append", default=[])
    parser.add_argument("--stylesheet", action="append", default=[])
    parser.add_argument("--script", action="append", default=[])
    parser.add_argument("--description")
    parser.add_argument("--keywords")
    parser.add_argument("--minify", action="store_true", default=defaults.minify)
    parser.add_argument("--log-json", action="store_true", default=False)
    return parser


def build_document(args: argparse.Namespace, defaults: DocumentDefaults) -> DocumentModel:
    defaults = dataclasses.replace(
        defaults,
        doctype=args.doctype,
        charset=args.charset,
        language=args.language,
        direction=args.direction,
        separator=args.separator,
        eol=args.eol,
        minify=args.minify,
    )

    document = DocumentModel(defaults, logger=logging.getLogger("docmodel.cli"))
    document.description = args.description
    document.keywords = args.keywords

    for title in args.title:
        document.append_title(title)
    for href in args.stylesheet:
        document.append_stylesheet(href)
    for src in args.script:
        document.append_javascript(src)

    return document


def render_page(document: DocumentModel) -> str:
    return Page(document).html


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))

    defaults = DocumentDefaults.from_environ()
    args = build_parser(defaults).parse_args(argv)

    if args.log_json:
        install("docmodel", level=logging.DEBUG)

    try:
        document = build_document(args, defaults)
    except ValidationError:
        logging.getLogger("docmodel.cli").exception("Could not build document")
        return 1

    sys.stdout.write(render_page(document) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
