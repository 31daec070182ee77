# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import TYPE_CHECKING

import abc

from docmodel.document import escape

if TYPE_CHECKING:
    from docmodel import DocumentModel


class Node(abc.ABC):
    @property
    @abc.abstractmethod
    def html(self) -> str:
        pass

    def __str__(self) -> str:
        return self.html


class TextNode(Node, str):
    __slots__ = ()

    @property
    def html(self) -> str:
        return escape(str.__str__(self))


class Markup(Node, str):
    """Trusted markup, emitted as-is."""

    __slots__ = ()

    @property
    def html(self) -> str:
        return str.__str__(self)


class Element(Node):  # pylint: disable=too-few-public-methods
    element: str
    attributes: dict[str, str | None]
    children: list[Node]

    def __init__(self, element: str, *children: Node | str, **attributes: str | None) -> None:
        self.element = element
        self.attributes = attributes
        self.children = [x if isinstance(x, Node) else TextNode(x) for x in children]

    @property
    def html(self) -> str:
        attributes = (
            f' {key.strip("_")}="{escape(value)}"'
            for key, value in self.attributes.items()
            if value
        )

        return (
            f"<{self.element}{''.join(attributes)}>"
            f"{''.join(x.html for x in self.children)}"
            f"</{self.element}>"
        )


class Page(Node):  # pylint: disable=too-few-public-methods
    """A full page: the model supplies everything outside of <body>."""

    document: DocumentModel
    children: list[Node]

    def __init__(self, document: DocumentModel, *elements: Node | str) -> None:
        self.document = document
        self.children = [x if isinstance(x, Node) else TextNode(x) for x in elements]

    @property
    def html(self) -> str:
        renderer = self.document.renderer
        eol = self.document.eol or ""

        return (
            renderer.render_doctype()
            + renderer.render_html_open()
            + renderer.render_head()
            + "<body>"
            + "".join(x.html for x in self.children)
            + eol
            + renderer.render_script_blocks_bottom()
            + "</body>"
            + eol
            + renderer.render_html_close()
        )
