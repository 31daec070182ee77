# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

DEFAULT_HEADING = "An Error Was Encountered"


class ValidationError(Exception):
    message: str
    status: int
    heading: str

    def __init__(
        self,
        message: str,
        *,
        status: int = 500,
        heading: str = DEFAULT_HEADING,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.heading = heading
