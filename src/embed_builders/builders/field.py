# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""EmbedFieldBuilder - one element of an embed's field list."""

from __future__ import annotations

from .base_builder import JsonBuilderBase
from .predicates import embed_field_predicate


class EmbedFieldBuilder(JsonBuilderBase):
    """Builder for an embed field ({'name', 'value', 'inline'}).

    Example:
        >>> EmbedFieldBuilder().set_name('Level').set_value('42').set_inline().to_dict()
        {'name': 'Level', 'value': '42', 'inline': True}
    """

    _predicate = staticmethod(embed_field_predicate)

    def set_name(self, name: str) -> EmbedFieldBuilder:
        return self._set("name", name)

    def set_value(self, value: str) -> EmbedFieldBuilder:
        return self._set("value", value)

    def set_inline(self, inline: bool = True) -> EmbedFieldBuilder:
        """Set whether this field is displayed inline."""
        return self._set("inline", inline)

    def clear_inline(self) -> EmbedFieldBuilder:
        return self._clear("inline")
