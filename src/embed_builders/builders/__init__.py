# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Builders for embed structural data.

Builder Types:
    - **EmbedBuilder**: the root document (title, fields, author, footer...)
    - **EmbedFieldBuilder**: one element of the field list
    - **EmbedAuthorBuilder**: the author block
    - **EmbedFooterBuilder**: the footer block

Helpers:
    - **resolve_builder**: turns data, a builder or a callable into a builder
    - **canonical_timestamp**: normalizes any timestamp input to ISO-8601 UTC text

Example:
    >>> from embed_builders.builders import EmbedBuilder
    >>>
    >>> embed = EmbedBuilder().set_title('Nightly report')
    >>> embed.author.set_name('scheduler')
    >>> embed.add_fields({'name': 'Jobs', 'value': '12'})
    >>> embed.to_dict()
"""

from embed_builders.builders.author import EmbedAuthorBuilder
from embed_builders.builders.base_builder import JsonBuilderBase, resolve_builder
from embed_builders.builders.embed import EmbedBuilder, canonical_timestamp
from embed_builders.builders.field import EmbedFieldBuilder
from embed_builders.builders.footer import EmbedFooterBuilder
from embed_builders.builders.predicates import (
    EMBED_MAX_FIELDS,
    EMBED_MAX_LENGTH,
    embed_author_predicate,
    embed_field_predicate,
    embed_footer_predicate,
    embed_length,
    embed_predicate,
)

__all__ = [
    "JsonBuilderBase",
    "resolve_builder",
    "EmbedBuilder",
    "EmbedFieldBuilder",
    "EmbedAuthorBuilder",
    "EmbedFooterBuilder",
    "canonical_timestamp",
    "EMBED_MAX_FIELDS",
    "EMBED_MAX_LENGTH",
    "embed_predicate",
    "embed_field_predicate",
    "embed_author_predicate",
    "embed_footer_predicate",
    "embed_length",
]
