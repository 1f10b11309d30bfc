# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Schema predicates for embed structural data.

Each predicate takes plain structural data (dicts, lists and primitives),
collects every violated constraint and raises a single ValidationError.
Predicates never mutate their input.

The embed predicate re-checks author, footer and every field with the same
shapes used by the standalone predicates, so nested data is validated
exactly once when a whole embed is serialized.
"""

from __future__ import annotations

from typing import Annotated, Any

from ..exceptions import ValidationError, ValidationIssue
from .validations import (
    MaxLength,
    MinLength,
    Range,
    Shape,
    Timestamp,
    Url,
    check_shape,
)

EMBED_MAX_FIELDS = 25
EMBED_MAX_LENGTH = 6000

TITLE_MAX_LENGTH = 256
DESCRIPTION_MAX_LENGTH = 4096
FIELD_NAME_MAX_LENGTH = 256
FIELD_VALUE_MAX_LENGTH = 1024
AUTHOR_NAME_MAX_LENGTH = 256
FOOTER_TEXT_MAX_LENGTH = 2048
COLOR_MAX = 0xFFFFFF

HttpUrl = Url(("http", "https"))
MediaUrl = Url(("http", "https", "attachment"))


class EmbedFieldShape(Shape):
    name: Annotated[str, MinLength(1), MaxLength(FIELD_NAME_MAX_LENGTH)]
    value: Annotated[str, MinLength(1), MaxLength(FIELD_VALUE_MAX_LENGTH)]
    inline: bool = None


class EmbedAuthorShape(Shape):
    name: Annotated[str, MinLength(1), MaxLength(AUTHOR_NAME_MAX_LENGTH)]
    url: Annotated[str, HttpUrl] = None
    icon_url: Annotated[str, MediaUrl] = None
    proxy_icon_url: str = None


class EmbedFooterShape(Shape):
    text: Annotated[str, MinLength(1), MaxLength(FOOTER_TEXT_MAX_LENGTH)]
    icon_url: Annotated[str, MediaUrl] = None
    proxy_icon_url: str = None


class EmbedMediaShape(Shape):
    url: Annotated[str, MediaUrl]


class EmbedShape(Shape):
    title: Annotated[str, MinLength(1), MaxLength(TITLE_MAX_LENGTH)] = None
    description: Annotated[str, MinLength(1), MaxLength(DESCRIPTION_MAX_LENGTH)] = None
    url: Annotated[str, HttpUrl] = None
    color: Annotated[int, Range(ge=0, le=COLOR_MAX)] = None
    timestamp: Annotated[str, Timestamp()] = None
    image: EmbedMediaShape = None
    thumbnail: EmbedMediaShape = None
    author: EmbedAuthorShape = None
    footer: EmbedFooterShape = None
    fields: Annotated[list[EmbedFieldShape], MaxLength(EMBED_MAX_FIELDS)] = None


def _text_len(value: Any) -> int:
    return len(value) if isinstance(value, str) else 0


def embed_length(data: dict[str, Any]) -> int:
    """Total character count the remote API limits to EMBED_MAX_LENGTH.

    Counts title, description, every field name and value, footer text and
    author name. Non-string values count as zero.
    """
    total = _text_len(data.get("title")) + _text_len(data.get("description"))
    for field in data.get("fields") or []:
        if isinstance(field, dict):
            total += _text_len(field.get("name")) + _text_len(field.get("value"))
    footer = data.get("footer")
    if isinstance(footer, dict):
        total += _text_len(footer.get("text"))
    author = data.get("author")
    if isinstance(author, dict):
        total += _text_len(author.get("name"))
    return total


def _raise_if(issues: list[ValidationIssue]) -> None:
    if issues:
        raise ValidationError(issues)


def embed_field_predicate(data: Any) -> None:
    _raise_if(check_shape(data, EmbedFieldShape))


def embed_author_predicate(data: Any) -> None:
    _raise_if(check_shape(data, EmbedAuthorShape))


def embed_footer_predicate(data: Any) -> None:
    _raise_if(check_shape(data, EmbedFooterShape))


def embed_predicate(data: Any) -> None:
    """Validate a complete embed, including nested author, footer and fields.

    Besides the per-attribute constraints, an embed must carry some content
    (title, description, a field, author, footer, image or thumbnail) and
    its embed_length() must not exceed EMBED_MAX_LENGTH.

    Raises:
        ValidationError: listing every violated constraint.
    """
    issues = check_shape(data, EmbedShape)
    if isinstance(data, dict):
        has_content = any(
            data.get(key) is not None
            for key in ("title", "description", "author", "footer", "image", "thumbnail")
        ) or bool(data.get("fields"))
        if not has_content:
            issues.append(
                ValidationIssue(
                    "<root>",
                    data,
                    "must have at least a title, description, field, footer, author, "
                    "image or thumbnail",
                )
            )
        total = embed_length(data)
        if total > EMBED_MAX_LENGTH:
            issues.append(
                ValidationIssue("<root>", total, f"total length must be at most {EMBED_MAX_LENGTH}")
            )
    _raise_if(issues)
