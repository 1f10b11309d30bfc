# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""embed-builders: fluent construction and validation of message embeds.

Example:
    >>> from embed_builders import EmbedBuilder
    >>> EmbedBuilder().set_title('Hello').set_color(0x5865F2).to_dict()
    {'title': 'Hello', 'color': 5793266}
"""

from embed_builders.arrays import normalize_array
from embed_builders.builders import (
    EmbedAuthorBuilder,
    EmbedBuilder,
    EmbedFieldBuilder,
    EmbedFooterBuilder,
)
from embed_builders.exceptions import ValidationError, ValidationIssue
from embed_builders.validation import (
    disable_validators,
    enable_validators,
    is_validation_enabled,
    set_validation_enabled,
    validation_enabled,
)

__version__ = "0.1.0"

__all__ = [
    "EmbedBuilder",
    "EmbedFieldBuilder",
    "EmbedAuthorBuilder",
    "EmbedFooterBuilder",
    "ValidationError",
    "ValidationIssue",
    "normalize_array",
    "enable_validators",
    "disable_validators",
    "is_validation_enabled",
    "set_validation_enabled",
    "validation_enabled",
]
