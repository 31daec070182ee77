# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Callable, Mapping
from typing import Any, Self

import functools
import logging
import types

from .config import DocumentDefaults
from .container import Item, NamedContainer
from .document import DocumentRenderer
from .errors import ValidationError
from .tables import CORE_CONTAINERS, EOL_TOKENS

_SCALAR_PROPERTIES = (
    "doctype",
    "charset",
    "language",
    "direction",
    "description",
    "keywords",
    "separator",
    "tab",
)


class DocumentModel:  # pylint: disable=too-many-instance-attributes,too-many-public-methods
    """
    Head-of-document state for a single page.

    Entries are held in named slots. The seven core slots are created here
    and can never be removed; further slots are added with `add_container`.
    Every mutation returns the model so calls can be chained.
    """

    doctype: str | None
    charset: str | None
    language: str | None
    direction: str | None
    description: str | None
    keywords: str | None
    separator: str
    eol: str
    tab: str

    logger: logging.Logger
    renderer: DocumentRenderer

    _containers: dict[str, NamedContainer | Any]
    _core: frozenset[str]
    _getters: dict[str, Callable[[], Any]]
    _setters: dict[str, Callable[[Any], Any]]

    def __init__(
        self,
        defaults: DocumentDefaults | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        defaults = defaults or DocumentDefaults()
        self.logger = logger or logging.getLogger(__name__)

        self.doctype = defaults.doctype
        self.charset = defaults.charset
        self.language = defaults.language
        self.direction = defaults.direction
        self.description = None
        self.keywords = None
        self.separator = defaults.separator
        self.tab = defaults.tab
        self.set_eol(defaults.eol)

        self._containers = {}
        self._core = frozenset()
        for name in CORE_CONTAINERS:
            self.add_container(name, is_container=True)
        self._core = frozenset(self._containers)

        self._getters = {
            "doctype_is_xhtml": self.doctype_is_xhtml,
            "title": self.title_text,
        }
        self._setters = {
            name: functools.partial(setattr, self, name) for name in _SCALAR_PROPERTIES
        }
        self._setters["title"] = self.set_title
        self._setters["eol"] = self.set_eol

        self.renderer = DocumentRenderer(self, minify=defaults.minify)

    @property
    def core_containers(self) -> tuple[str, ...]:
        return tuple(name for name in self._containers if name in self._core)

    def containers(self) -> Mapping[str, NamedContainer | Any]:
        return types.MappingProxyType(dict(self._containers))

    def get_property(self, name: str) -> Any:
        if getter := self._getters.get(name):
            return getter()

        slot = self._containers.get(name)
        if isinstance(slot, NamedContainer) and name not in self._core:
            return slot

        return None

    def set_property(self, name: str, value: Any) -> Self:
        # Names without a registered setter are accepted and dropped.
        if setter := self._setters.get(name):
            setter(value)

        return self

    def render(self, name: str | None = None) -> str:
        return self.renderer.render(name)

    # Generic slot API

    def _container(self, key: str | None, action: str) -> NamedContainer:
        if not self.contains(key):
            raise ValidationError(f"can't {action} a container with key {key}")

        slot = self._containers[key]  # type: ignore[index]
        if not isinstance(slot, NamedContainer):
            raise ValidationError(f"can't {action} {key}, it is not a container")

        return slot

    def append(self, key: str | None, value: Item = None) -> Self:
        self._container(key, "append").append(value)
        return self

    def prepend(self, key: str | None, value: Item = None) -> Self:
        self._container(key, "prepend").prepend(value)
        return self

    def set(self, key: str | None, value: Item = None) -> Self:
        if not self.contains(key):
            raise ValidationError(f"can't set a value for a container with key {key}")

        slot = self._containers[key]  # type: ignore[index]
        if isinstance(slot, NamedContainer):
            slot.replace_all(value)
        else:
            self._containers[key] = value  # type: ignore[index]

        return self

    def add_container(self, key: str | None = None, is_container: bool = False) -> Self:
        if key is None:
            raise ValidationError("can't create a container without a key")

        if key in self._containers:
            raise ValidationError(f"can't create a container that already exists ({key})")

        self._containers[key] = NamedContainer() if is_container is True else None
        self.logger.debug(
            "Added slot",
            extra={"container": key, "is_container": is_container is True},
        )

        return self

    def remove_container(self, key: str | None = None) -> Self:
        if key is None:
            raise ValidationError("can't remove a container without a key")

        if not self.contains(key) or key in self._core:
            raise ValidationError(f"can't remove a container with key {key}")

        del self._containers[key]
        self.logger.debug("Removed slot", extra={"container": key})

        return self

    def contains(self, key: str | None = None) -> bool:
        if key is None:
            raise ValidationError("can't query document without a key")

        return key in self._containers

    def to_sequence(self, key: str | None = None) -> list[Any]:
        if not self.contains(key):
            raise ValidationError(f"can't build a sequence from a container named {key}")

        slot = self._containers[key]  # type: ignore[index]

        if isinstance(slot, NamedContainer):
            return slot.to_sequence()
        if isinstance(slot, list | tuple):
            return list(slot)
        if isinstance(slot, Mapping):
            return list(slot.values())
        if hasattr(slot, "__dict__"):
            return list(vars(slot).values())

        return [slot]

    # Scalar helpers

    def doctype_is_xhtml(self) -> bool:
        return "xhtml" in (self.doctype or "").lower()

    def title_text(self) -> str:
        return (self.separator or "").join(str(part) for part in self.to_sequence("title"))

    def set_eol(self, value: str | None = None) -> Self:
        self.eol = EOL_TOKENS.get(value, value or "")  # type: ignore[arg-type]
        return self

    # Title

    def set_title(self, value: str | None) -> Self:
        if value:
            self.set("title", value)
        return self

    def prepend_title(self, value: str | None) -> Self:
        if value:
            self.prepend("title", value)
        return self

    def append_title(self, value: str | None) -> Self:
        if value:
            self.append("title", value)
        return self

    # Metas

    def add_meta(
        self,
        name: str | None = None,
        content: str | None = None,
        prepend: bool = False,
    ) -> Self:
        if not name:
            return self

        attrs: dict[str, str] = {}
        if name in ("charset", "http-equiv"):
            attrs = {"name": name}
        elif content:
            attrs = {"name": name, "content": content}

        if attrs:
            self._insert("metas", attrs, prepend)

        return self

    def append_meta(self, name: str | None = None, content: str | None = None) -> Self:
        return self.add_meta(name, content)

    def prepend_meta(self, name: str | None = None, content: str | None = None) -> Self:
        return self.add_meta(name, content, prepend=True)

    # Stylesheets and CSS blocks

    def add_stylesheet(
        self,
        href: str | None = None,
        media: str | None = None,
        prepend: bool = False,
    ) -> Self:
        if not href:
            return self

        entry: Item = {"href": href, "media": media} if media else href
        self._insert("stylesheets", entry, prepend)

        return self

    def append_stylesheet(self, href: str | None = None, media: str | None = None) -> Self:
        return self.add_stylesheet(href, media)

    def prepend_stylesheet(self, href: str | None = None, media: str | None = None) -> Self:
        return self.add_stylesheet(href, media, prepend=True)

    def add_css_block(
        self,
        content: str | None = None,
        media: str | None = None,
        prepend: bool = False,
    ) -> Self:
        if content:
            self._insert("cssBlocks", {"content": content, "media": media}, prepend)
        return self

    # Scripts

    def add_script(  # noqa: PLR0913
        self,
        src: str | None = None,
        type: str | None = "text/javascript",  # noqa: A002 # pylint: disable=redefined-builtin
        defer: bool = False,
        async_: bool = False,
        prepend: bool = False,
    ) -> Self:
        if not src or not type or not isinstance(defer, bool) or not isinstance(async_, bool):
            return self

        self._insert(
            "scripts",
            {"src": src, "type": type, "defer": defer, "async": async_},
            prepend,
        )
        return self

    def append_script(
        self,
        src: str | None = None,
        type: str | None = "text/javascript",  # noqa: A002 # pylint: disable=redefined-builtin
        defer: bool = False,
        async_: bool = False,
    ) -> Self:
        return self.add_script(src, type, defer, async_)

    def prepend_script(
        self,
        src: str | None = None,
        type: str | None = "text/javascript",  # noqa: A002 # pylint: disable=redefined-builtin
        defer: bool = False,
        async_: bool = False,
    ) -> Self:
        return self.add_script(src, type, defer, async_, prepend=True)

    def add_javascript(
        self,
        src: str | None = None,
        defer: bool = False,
        async_: bool = False,
        prepend: bool = False,
    ) -> Self:
        return self.add_script(src, "text/javascript", defer, async_, prepend)

    def append_javascript(
        self,
        src: str | None = None,
        defer: bool = False,
        async_: bool = False,
    ) -> Self:
        return self.add_javascript(src, defer, async_)

    def prepend_javascript(
        self,
        src: str | None = None,
        defer: bool = False,
        async_: bool = False,
    ) -> Self:
        return self.add_javascript(src, defer, async_, prepend=True)

    # Inline script blocks

    def add_script_block(
        self,
        content: str | None = None,
        type: str = "text/javascript",  # noqa: A002 # pylint: disable=redefined-builtin
        prepend: bool = False,
    ) -> Self:
        if content:
            self._insert("scriptBlocks", {"content": content, "type": type}, prepend)
        return self

    def add_script_block_bottom(
        self,
        content: str | None = None,
        type: str = "text/javascript",  # noqa: A002 # pylint: disable=redefined-builtin
        prepend: bool = False,
    ) -> Self:
        if content:
            self._insert("scriptBlocksBottom", {"content": content, "type": type}, prepend)
        return self

    def add_javascript_block(self, content: str | None, prepend: bool = False) -> Self:
        return self.add_script_block(content, "text/javascript", prepend)

    def append_javascript_block(self, content: str | None) -> Self:
        return self.add_script_block(content, "text/javascript")

    def prepend_javascript_block(self, content: str | None) -> Self:
        return self.add_script_block(content, "text/javascript", prepend=True)

    def add_javascript_block_bottom(self, content: str | None, prepend: bool = False) -> Self:
        return self.add_script_block_bottom(content, "text/javascript", prepend)

    def append_javascript_block_bottom(self, content: str | None) -> Self:
        return self.add_script_block_bottom(content, "text/javascript")

    def prepend_javascript_block_bottom(self, content: str | None) -> Self:
        return self.add_script_block_bottom(content, "text/javascript", prepend=True)

    # Keywords

    def add_keywords(self, keywords: str | None = None, prepend: bool = False) -> Self:
        # Joining onto an empty value leaves a stray ", " at the edge.
        if keywords:
            current = self.keywords or ""
            self.keywords = f"{keywords}, {current}" if prepend else f"{current}, {keywords}"
        return self

    def append_keywords(self, keywords: str | None = None) -> Self:
        return self.add_keywords(keywords)

    def prepend_keywords(self, keywords: str | None = None) -> Self:
        return self.add_keywords(keywords, prepend=True)

    def _insert(self, key: str, value: Item, prepend: bool) -> None:
        if prepend is True:
            self.prepend(key, value)
        else:
            self.append(key, value)
