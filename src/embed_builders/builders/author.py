# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""EmbedAuthorBuilder - the author block of an embed."""

from __future__ import annotations

from .base_builder import JsonBuilderBase
from .predicates import embed_author_predicate


class EmbedAuthorBuilder(JsonBuilderBase):
    """Builder for the embed author.

    Only ``name`` is required; ``url``, ``icon_url`` and ``proxy_icon_url``
    are optional and can be cleared.
    """

    _predicate = staticmethod(embed_author_predicate)

    def set_name(self, name: str) -> EmbedAuthorBuilder:
        return self._set("name", name)

    def set_url(self, url: str) -> EmbedAuthorBuilder:
        """Set the URL the author name links to."""
        return self._set("url", url)

    def clear_url(self) -> EmbedAuthorBuilder:
        return self._clear("url")

    def set_icon_url(self, url: str) -> EmbedAuthorBuilder:
        """Set the author icon URL (http, https or attachment)."""
        return self._set("icon_url", url)

    def clear_icon_url(self) -> EmbedAuthorBuilder:
        return self._clear("icon_url")

    def set_proxy_icon_url(self, proxy_icon_url: str) -> EmbedAuthorBuilder:
        return self._set("proxy_icon_url", proxy_icon_url)

    def clear_proxy_icon_url(self) -> EmbedAuthorBuilder:
        return self._clear("proxy_icon_url")
