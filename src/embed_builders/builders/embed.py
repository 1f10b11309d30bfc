# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""EmbedBuilder - the root document builder.

The embed owns an optional author, an optional footer and an ordered list
of fields, each held as a child builder. Scalar attributes live in a flat
dict; a missing key means the attribute is absent.

Example:
    >>> embed = (
    ...     EmbedBuilder()
    ...     .set_title('Release 2.1')
    ...     .set_color(0x00FF00)
    ...     .set_author({'name': 'ci-bot'})
    ...     .add_fields(
    ...         {'name': 'Tests', 'value': '1204 passed'},
    ...         lambda f: f.set_name('Coverage').set_value('93%').set_inline(),
    ...     )
    ...     .set_footer(lambda f: f.set_text('build #812'))
    ... )
    >>> payload = embed.to_dict()
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime, timedelta, timezone
from typing import Any, Union

from ..arrays import normalize_array
from ..validation import resolve_validation
from .author import EmbedAuthorBuilder
from .base_builder import resolve_builder
from .field import EmbedFieldBuilder
from .footer import EmbedFooterBuilder
from .predicates import embed_length, embed_predicate
from .validations import parse_timestamp

logger = logging.getLogger(__name__)

FieldInput = Union[
    Mapping[str, Any], EmbedFieldBuilder, Callable[[EmbedFieldBuilder], EmbedFieldBuilder]
]
AuthorInput = Union[
    Mapping[str, Any], EmbedAuthorBuilder, Callable[[EmbedAuthorBuilder], EmbedAuthorBuilder]
]
FooterInput = Union[
    Mapping[str, Any], EmbedFooterBuilder, Callable[[EmbedFooterBuilder], EmbedFooterBuilder]
]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def canonical_timestamp(value: datetime | date | int | float | str | None = None) -> str:
    """Return value as ISO-8601 UTC text with millisecond precision.

    Args:
        value: A datetime (naive means UTC), a date (midnight UTC), epoch
            milliseconds, timestamp text (ISO-8601, RFC 2822 or anything
            dateutil can parse), or None for now.

    Returns:
        Text like '2024-05-01T12:00:00.000Z'.

    Raises:
        ValueError: if text cannot be parsed.
        TypeError: for any other input type.
    """
    if value is None:
        moment = datetime.now(timezone.utc)
    elif isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        moment = _EPOCH + timedelta(milliseconds=value)
    elif isinstance(value, str):
        moment = parse_timestamp(value.strip())
    else:
        raise TypeError(f"Cannot use {type(value).__name__} as a timestamp")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"


class EmbedBuilder:
    """Builder that creates API-compatible structural data for embeds.

    All setters return the builder itself so calls can be chained.
    Constraints are only checked by to_dict(), never by setters, so an
    intermediate state (e.g. 30 fields) is legal until serialized.

    Attributes:
        _data: Scalar attributes and any unknown keys given at construction.
        _author: The author builder, or None.
        _footer: The footer builder, or None.
        _fields: The field builders, or None if never set.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        """Create an embed, deep-copying existing structural data.

        Args:
            data: Embed structural data. author, footer and fields become
                child builders; every other key is kept as-is.
        """
        self._data: dict[str, Any] = copy.deepcopy(dict(data)) if data else {}
        author = self._data.pop("author", None)
        footer = self._data.pop("footer", None)
        fields = self._data.pop("fields", None)
        # An empty {} author or footer is kept; only a missing one means absent
        self._author: EmbedAuthorBuilder | None = (
            EmbedAuthorBuilder(author) if author is not None else None
        )
        self._footer: EmbedFooterBuilder | None = (
            EmbedFooterBuilder(footer) if footer is not None else None
        )
        self._fields: list[EmbedFieldBuilder] | None = (
            [EmbedFieldBuilder(field) for field in fields] if fields is not None else None
        )

    # --- Children ---

    @property
    def author(self) -> EmbedAuthorBuilder:
        """The author builder, created empty on first access."""
        if self._author is None:
            self._author = EmbedAuthorBuilder()
        return self._author

    @property
    def footer(self) -> EmbedFooterBuilder:
        """The footer builder, created empty on first access."""
        if self._footer is None:
            self._footer = EmbedFooterBuilder()
        return self._footer

    @property
    def fields(self) -> tuple[EmbedFieldBuilder, ...]:
        """Read-only view of the field builders.

        Use add_fields, splice_fields or set_fields to change the list.
        """
        if self._fields is None:
            self._fields = []
        return tuple(self._fields)

    def add_fields(self, *fields: FieldInput | list[FieldInput]) -> EmbedBuilder:
        """Append fields to the embed.

        Accepts either a single list of fields or any number of fields.
        Each field may be structural data, an EmbedFieldBuilder, or a
        callable receiving a new EmbedFieldBuilder and returning one.
        The 25 fields limit is checked by to_dict(), not here.

        Example:
            >>> embed.add_fields(
            ...     {'name': 'Field 1', 'value': 'Value 1'},
            ...     {'name': 'Field 2', 'value': 'Value 2'},
            ... )
        """
        resolved = [resolve_builder(field, EmbedFieldBuilder) for field in normalize_array(fields)]
        if self._fields is None:
            self._fields = []
        self._fields.extend(resolved)
        return self

    def splice_fields(self, index: int, delete_count: int, *fields: FieldInput) -> EmbedBuilder:
        """Remove, replace or insert fields, like JavaScript Array.splice.

        A negative index counts from the end. delete_count is clamped to the
        fields available after index; a negative count removes nothing.

        Example:
            >>> embed.splice_fields(0, 1)    # remove the first field
            >>> embed.splice_fields(-1, 1)   # remove the last field
            >>> embed.splice_fields(1, 0, {'name': 'New', 'value': 'x'})  # insert at 1

        Args:
            index: The position to start at.
            delete_count: How many fields to remove.
            *fields: Fields inserted at index.
        """
        resolved = [resolve_builder(field, EmbedFieldBuilder) for field in fields]
        if self._fields is None:
            self._fields = []
        length = len(self._fields)
        start = max(length + index, 0) if index < 0 else min(index, length)
        count = max(0, min(delete_count, length - start))
        self._fields[start : start + count] = resolved
        return self

    def set_fields(self, *fields: FieldInput | list[FieldInput]) -> EmbedBuilder:
        """Replace every field with the given ones (list or variadic)."""
        current = len(self._fields) if self._fields is not None else 0
        return self.splice_fields(0, current, *normalize_array(fields))

    def set_author(self, options: AuthorInput) -> EmbedBuilder:
        """Set the author from data, an EmbedAuthorBuilder, or a callable."""
        self._author = resolve_builder(options, EmbedAuthorBuilder)
        return self

    def clear_author(self) -> EmbedBuilder:
        self._author = None
        return self

    def set_footer(self, options: FooterInput) -> EmbedBuilder:
        """Set the footer from data, an EmbedFooterBuilder, or a callable."""
        self._footer = resolve_builder(options, EmbedFooterBuilder)
        return self

    def clear_footer(self) -> EmbedBuilder:
        self._footer = None
        return self

    # --- Scalars ---

    def _set(self, key: str, value: Any) -> EmbedBuilder:
        self._data[key] = value
        return self

    def _clear(self, key: str) -> EmbedBuilder:
        self._data.pop(key, None)
        return self

    def set_title(self, title: str) -> EmbedBuilder:
        return self._set("title", title)

    def clear_title(self) -> EmbedBuilder:
        return self._clear("title")

    def set_description(self, description: str) -> EmbedBuilder:
        return self._set("description", description)

    def clear_description(self) -> EmbedBuilder:
        return self._clear("description")

    def set_url(self, url: str) -> EmbedBuilder:
        """Set the URL the title links to."""
        return self._set("url", url)

    def clear_url(self) -> EmbedBuilder:
        return self._clear("url")

    def set_color(self, color: int) -> EmbedBuilder:
        """Set the sidebar color as an integer, e.g. 0xFF8800."""
        return self._set("color", color)

    def clear_color(self) -> EmbedBuilder:
        return self._clear("color")

    def set_timestamp(
        self, timestamp: datetime | date | int | float | str | None = None
    ) -> EmbedBuilder:
        """Set the timestamp, stored as ISO-8601 UTC text.

        Args:
            timestamp: A datetime, a date, epoch milliseconds, timestamp
                text (ISO-8601 or e.g. RFC 2822), or None for the current time.
        """
        return self._set("timestamp", canonical_timestamp(timestamp))

    def clear_timestamp(self) -> EmbedBuilder:
        return self._clear("timestamp")

    def set_image(self, url: str | None) -> EmbedBuilder:
        """Set the image URL. None or an empty string clears the image."""
        if not url:
            return self._clear("image")
        return self._set("image", {"url": url})

    def clear_image(self) -> EmbedBuilder:
        return self._clear("image")

    def set_thumbnail(self, url: str | None) -> EmbedBuilder:
        """Set the thumbnail URL. None or an empty string clears it."""
        if not url:
            return self._clear("thumbnail")
        return self._set("thumbnail", {"url": url})

    def clear_thumbnail(self) -> EmbedBuilder:
        return self._clear("thumbnail")

    # --- Serialization ---

    def _assemble(self) -> dict[str, Any]:
        # Children skip validation: embed_predicate re-checks them.
        data = copy.deepcopy(self._data)
        if self._author is not None:
            data["author"] = self._author.to_dict(False)
        if self._fields is not None:
            data["fields"] = [field.to_dict(False) for field in self._fields]
        if self._footer is not None:
            data["footer"] = self._footer.to_dict(False)
        return data

    @property
    def length(self) -> int:
        """Character count of the embed as limited by the remote API."""
        return embed_length(self._assemble())

    def to_dict(self, validation_override: bool | None = None) -> dict[str, Any]:
        """Serialize to API-compatible structural data.

        With validation disabled there is no guarantee the result is valid.

        Args:
            validation_override: True/False force validation on/off; None
                uses the process-wide policy.

        Raises:
            ValidationError: listing every violated constraint of the embed
                and its children.
        """
        data = self._assemble()
        if resolve_validation(validation_override):
            embed_predicate(data)
        else:
            logger.debug("embed serialized without validation")
        return data

    def __repr__(self) -> str:
        return f"EmbedBuilder({self._assemble()!r})"
