# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from .config import DocumentDefaults
from .container import NamedContainer
from .document import DocumentRenderer
from .errors import ValidationError
from .model import DocumentModel
from .tables import CORE_CONTAINERS, DOCTYPES, VALID_LANGUAGES

__all__ = [
    "CORE_CONTAINERS",
    "DOCTYPES",
    "VALID_LANGUAGES",
    "DocumentDefaults",
    "DocumentModel",
    "DocumentRenderer",
    "NamedContainer",
    "ValidationError",
]
