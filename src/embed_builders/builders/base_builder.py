# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""JsonBuilderBase - base class for the leaf embed builders.

A leaf builder owns a flat dict of attributes for one nested sub-object.
Setters overwrite a key, clearers remove it, and to_dict() returns a deep
copy validated with the builder's predicate.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ..validation import resolve_validation

B = TypeVar("B", bound="JsonBuilderBase")


class JsonBuilderBase:
    """Base class for builders of one flat sub-object.

    Subclasses set ``_predicate`` to the schema predicate used by to_dict()
    and add one setter per attribute:

        class EmbedFooterBuilder(JsonBuilderBase):
            _predicate = staticmethod(embed_footer_predicate)

            def set_text(self, text):
                return self._set('text', text)

    Attributes:
        _data: The attributes set so far. A missing key means the attribute
            is absent.
    """

    _predicate: Callable[[Any], None]

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        """Create a builder, deep-copying data when given."""
        self._data: dict[str, Any] = copy.deepcopy(dict(data)) if data else {}

    def _set(self: B, key: str, value: Any) -> B:
        self._data[key] = value
        return self

    def _clear(self: B, key: str) -> B:
        self._data.pop(key, None)
        return self

    def clone(self: B) -> B:
        """Return an independent copy of this builder."""
        return type(self)(self._data)

    def to_dict(self, validation_override: bool | None = None) -> dict[str, Any]:
        """Serialize to API-compatible structural data.

        With validation disabled there is no guarantee the result is valid.

        Args:
            validation_override: True/False force validation on/off; None
                uses the process-wide policy.

        Raises:
            ValidationError: if validation runs and the data does not conform.
        """
        data = copy.deepcopy(self._data)
        if resolve_validation(validation_override):
            type(self)._predicate(data)
        return data

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def resolve_builder(value: Any, builder_cls: type[B]) -> B:
    """Resolve one builder input to a builder instance.

    Every method accepting a child (add_fields, splice_fields, set_author,
    set_footer...) accepts three forms:

        - an instance of builder_cls: used as-is, not copied
        - a callable: called with a fresh builder_cls() and its result used
        - structural data: passed to builder_cls(data)

    Args:
        value: The input to resolve.
        builder_cls: The builder class expected.

    Returns:
        A builder_cls instance.
    """
    if isinstance(value, builder_cls):
        return value
    if callable(value):
        return value(builder_cls())
    return builder_cls(value)
