# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by embed builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationIssue:
    """One violated constraint.

    Attributes:
        path: Attribute path inside the document, e.g. 'fields[3].name'.
        value: The offending value (None when the attribute is missing).
        constraint: Human readable description of the violated constraint.
    """

    path: str
    value: Any
    constraint: str

    def __str__(self) -> str:
        return f"'{self.path}': {self.constraint} (got {self.value!r})"


class ValidationError(ValueError):
    """Raised when structural data does not conform to the embed schema."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = list(issues)
        super().__init__("Embed validation failed: " + "; ".join(str(i) for i in self.issues))

    @property
    def paths(self) -> list[str]:
        """Attribute paths of every issue, in report order."""
        return [issue.path for issue in self.issues]
