# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Mapping

import dataclasses
import os

ENV_PREFIX = "DOCMODEL_"


@dataclasses.dataclass(frozen=True)
class DocumentDefaults:
    doctype: str = "html5"
    charset: str = "UTF-8"
    language: str = "en-gb"
    direction: str = "ltr"
    separator: str = " : "
    eol: str = "\n"
    tab: str = "\t"
    minify: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> DocumentDefaults:
        environ = os.environ if environ is None else environ
        values: dict[str, str | bool] = {}

        for field in dataclasses.fields(cls):
            raw = environ.get(ENV_PREFIX + field.name.upper())
            if raw is None:
                continue

            if field.type in (bool, "bool"):
                values[field.name] = raw.strip().lower() in ("1", "true", "yes", "on")
            else:
                values[field.name] = raw

        return cls(**values)  # type: ignore[arg-type]
