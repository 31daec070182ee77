# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

import html

import rcssmin  # type: ignore[import-untyped]
import rjsmin  # type: ignore[import-untyped]

from .tables import DOCTYPES, VALID_LANGUAGES

if TYPE_CHECKING:
    from .model import DocumentModel

DEFAULT_CHARSET = "UTF-8"
XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"


def escape(value: Any) -> str:
    # Double quotes are escaped, single quotes are left alone.
    return html.escape(str(value), quote=False).replace('"', "&quot;")


class DocumentRenderer:
    """
    Turns the current state of a DocumentModel into markup fragments.

    Nothing is cached: each call reads the model afresh, so fragments can be
    rendered any number of times. Assembling the fragments into a page is
    left to the caller (or to `render_head` for the common case).
    """

    model: DocumentModel
    minify: bool
    _routines: dict[str, Callable[[], str]]

    def __init__(self, model: DocumentModel, *, minify: bool = False) -> None:
        self.model = model
        self.minify = minify

        routines: dict[str, Callable[[], str]] = {
            "doctype": self.render_doctype,
            "charset": self.render_charset,
            "title": self.render_title,
            "metas": self.render_metas,
            "stylesheets": self.render_stylesheets,
            "cssBlocks": self.render_css_blocks,
            "scripts": self.render_scripts,
            "javascript": self.render_scripts,
            "scriptBlocks": self.render_script_blocks,
            "javascriptBlocks": self.render_script_blocks,
            "scriptBlocksBottom": self.render_script_blocks_bottom,
            "javascriptBlocksBottom": self.render_script_blocks_bottom,
            "keywords": self.render_keywords,
            "description": self.render_description,
            "htmlOpen": self.render_html_open,
            "htmlClose": self.render_html_close,
            "head": self.render_head,
        }
        self._routines = {name.lower(): routine for name, routine in routines.items()}

    def render(self, name: str | None = None) -> str:
        if not name:
            return ""

        routine = self._routines.get(name.lower())
        return routine() if routine else ""

    @property
    def _charset(self) -> str:
        return self.model.charset or DEFAULT_CHARSET

    @property
    def _eol(self) -> str:
        return self.model.eol or ""

    def _line(self, markup: str) -> str:
        return f"{self.model.tab or ''}{markup}{self._eol}"

    def switch_doctype(self, doctype: str | None = None) -> str:
        self.model.doctype = doctype
        return self.render_doctype()

    def render_doctype(self) -> str:
        if not self.model.doctype or self.model.doctype not in DOCTYPES:
            return ""

        return DOCTYPES[self.model.doctype] + self._eol

    def render_charset(self) -> str:
        return self._line(
            f'<meta http-equiv="Content-type" content="text/html;charset={self._charset}">',
        )

    def render_title(self) -> str:
        return self._line(f"<title>{escape(self.model.title_text())}</title>")

    def render_metas(self) -> str:
        lines = []

        for meta in self.model.to_sequence("metas"):
            if not isinstance(meta, Mapping) or not meta.get("name"):
                continue

            name = meta["name"]
            if name == "charset" or (name == "http-equiv" and self.model.charset):
                lines.append(
                    self._line(
                        '<meta http-equiv="Content-type" '
                        f'content="text/html;charset={escape(self._charset)}" />',
                    ),
                )
            elif meta.get("content"):
                content = escape(meta["content"])
                lines.append(self._line(f'<meta name="{name}" content="{content}" />'))

        return "".join(lines)

    def render_stylesheets(self) -> str:
        lines = []

        for stylesheet in self.model.to_sequence("stylesheets"):
            media = ""
            if isinstance(stylesheet, Mapping):
                if "href" not in stylesheet:
                    continue

                href = stylesheet["href"]
                if stylesheet.get("media"):
                    media = f' media="{stylesheet["media"]}"'
            else:
                href = stylesheet

            lines.append(
                self._line(f'<link rel="stylesheet" type="text/css" href="{href}"{media} />'),
            )

        return "".join(lines)

    def render_css_blocks(self) -> str:
        lines = []

        for block in self.model.to_sequence("cssBlocks"):
            if not isinstance(block, Mapping):
                continue

            content = str(block.get("content", ""))
            if self.minify:
                content = rcssmin.cssmin(content)

            media = f' media="{block["media"]}"' if block.get("media") else ""
            lines.append(self._line(f'<style type="text/css"{media}>'))
            lines.append(content + self._eol)
            lines.append(self._line("</style>"))

        return "".join(lines)

    def render_scripts(self) -> str:
        lines = []

        for script in self.model.to_sequence("scripts"):
            if isinstance(script, str):
                script = {"src": script, "type": None}
            elif not isinstance(script, Mapping):
                continue

            if "src" not in script:
                continue

            tag = f'<script src="{script["src"]}"'
            if script.get("type") is not None:
                tag += f' type="{script["type"]}"'
            if script.get("defer"):
                tag += ' defer="defer"'
            if script.get("async"):
                tag += ' async="async"'

            lines.append(self._line(tag + "></script>"))

        return "".join(lines)

    def _script_blocks(self, key: str) -> str:
        lines = []

        for script in self.model.to_sequence(key):
            if not isinstance(script, Mapping):
                continue

            content = str(script.get("content", ""))
            if self.minify:
                content = rjsmin.jsmin(content)

            lines.append(self._line(f'<script type="{script.get("type", "")}">'))
            lines.append(content + self._eol)
            lines.append(self._line("</script>"))

        return "".join(lines)

    def render_script_blocks(self) -> str:
        return self._script_blocks("scriptBlocks")

    def render_script_blocks_bottom(self) -> str:
        return self._script_blocks("scriptBlocksBottom")

    def _named_meta(self, name: str, value: str | None) -> str:
        if not value:
            return ""

        return self._line(f'<meta name="{name}" content="{escape(value)}" />')

    def render_keywords(self) -> str:
        return self._named_meta("keywords", self.model.keywords)

    def render_description(self) -> str:
        return self._named_meta("description", self.model.description)

    def render_html_open(self) -> str:
        markup = "<html"

        is_xhtml = self.model.doctype_is_xhtml()
        if is_xhtml:
            markup += f' xmlns="{XHTML_NAMESPACE}"'

        if self.model.language:
            language = self.model.language.split("-")[0].lower()
            if language in VALID_LANGUAGES:
                attribute = "xml:lang" if is_xhtml else "lang"
                markup += f' {attribute}="{language}"'

        if direction := escape(self.model.direction or ""):
            markup += f' dir="{direction}"'

        return markup + ">" + self._eol

    def render_html_close(self) -> str:
        return "</html>"

    def render_head(self) -> str:
        return (
            "<head>"
            + self._eol
            + self.render_charset()
            + self.render_title()
            + self.render_metas()
            + self.render_description()
            + self.render_keywords()
            + self.render_stylesheets()
            + self.render_css_blocks()
            + self.render_scripts()
            + self.render_script_blocks()
            + "</head>"
            + self._eol
        )
