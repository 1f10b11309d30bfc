# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""EmbedFooterBuilder - the footer block of an embed."""

from __future__ import annotations

from .base_builder import JsonBuilderBase
from .predicates import embed_footer_predicate


class EmbedFooterBuilder(JsonBuilderBase):
    """Builder for the embed footer ({'text', 'icon_url', 'proxy_icon_url'})."""

    _predicate = staticmethod(embed_footer_predicate)

    def set_text(self, text: str) -> EmbedFooterBuilder:
        return self._set("text", text)

    def set_icon_url(self, url: str) -> EmbedFooterBuilder:
        """Set the footer icon URL (http, https or attachment)."""
        return self._set("icon_url", url)

    def clear_icon_url(self) -> EmbedFooterBuilder:
        return self._clear("icon_url")

    def set_proxy_icon_url(self, proxy_icon_url: str) -> EmbedFooterBuilder:
        return self._set("proxy_icon_url", proxy_icon_url)

    def clear_proxy_icon_url(self) -> EmbedFooterBuilder:
        return self._clear("proxy_icon_url")
