# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterator, Mapping
from typing import Any, TypeAlias

Item: TypeAlias = str | Mapping[str, Any] | Any


class NamedContainer:
    """Ordered list of head entries; the insertion order is the render order."""

    _items: list[Item]

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items = []

    def append(self, item: Item) -> None:
        self._items.append(item)

    def prepend(self, item: Item) -> None:
        self._items = [item, *self._items]

    def replace_all(self, item: Item) -> None:
        if not item:
            return

        self._items = [item]

    def to_sequence(self) -> list[Item]:
        return list(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.to_sequence())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"NamedContainer({self._items!r})"
