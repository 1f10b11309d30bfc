# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Validation utilities for embed structural data.

Shapes are declared as plain classes whose annotations describe the keys
of a mapping. Attributes with a default value are optional; attributes
without one are required. An optional key may be absent, but a present
null is only accepted when the hint allows None.

Constraint classes for use with Annotated:
    Range: min/max value constraints for numbers (ge, le, gt, lt)
    MinLength / MaxLength: bounds on len() of strings and lists
    Url: URL with an allowed scheme
    Timestamp: ISO-8601 timestamp text

Type hints supported:
    - Basic types: int, str, bool, float
    - list[T] for generics
    - X | None for keys that accept null
    - Annotated[T, validator...] for validators
    - Shape subclasses and list[Shape] for nested mappings

Example:
    >>> class PointShape(Shape):
    ...     x: Annotated[int, Range(ge=0)]
    ...     label: Annotated[str, MaxLength(10)] | None = None
    >>> check_shape({'x': -1}, PointShape)
    [ValidationIssue(path='x', value=-1, constraint='must be >= 0')]
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import (
    Annotated,
    Any,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)
from urllib.parse import urlparse

from dateutil import parser
from dateutil.parser import isoparse
from genro_toolbox import safe_is_instance

from ..exceptions import ValidationIssue

# Builders must never reach structural data. Checked by name because this
# module is imported by the builder modules themselves.
BUILDER_CLASS_NAMES = (
    "embed_builders.builders.base_builder.JsonBuilderBase",
    "embed_builders.builders.field.EmbedFieldBuilder",
    "embed_builders.builders.author.EmbedAuthorBuilder",
    "embed_builders.builders.footer.EmbedFooterBuilder",
    "embed_builders.builders.embed.EmbedBuilder",
)


# --- Validator classes (Annotated metadata) ---


@dataclass(frozen=True)
class Range:
    """Range constraint for numeric validation (Pydantic-style: ge, le, gt, lt)."""

    ge: float | None = None
    le: float | None = None
    gt: float | None = None
    lt: float | None = None

    def __call__(self, value: Any) -> None:
        if not isinstance(value, (int, float)):
            raise TypeError("Range validator requires int or float")
        if self.ge is not None and value < self.ge:
            raise ValueError(f"must be >= {self.ge}")
        if self.le is not None and value > self.le:
            raise ValueError(f"must be <= {self.le}")
        if self.gt is not None and value <= self.gt:
            raise ValueError(f"must be > {self.gt}")
        if self.lt is not None and value >= self.lt:
            raise ValueError(f"must be < {self.lt}")


@dataclass(frozen=True)
class MinLength:
    """Lower bound on len() for strings and lists."""

    length: int

    def __call__(self, value: Any) -> None:
        if len(value) < self.length:
            unit = "characters" if isinstance(value, str) else "items"
            raise ValueError(f"must be at least {self.length} {unit} long")


@dataclass(frozen=True)
class MaxLength:
    """Upper bound on len() for strings and lists."""

    length: int

    def __call__(self, value: Any) -> None:
        if len(value) > self.length:
            unit = "characters" if isinstance(value, str) else "items"
            raise ValueError(f"must be at most {self.length} {unit} long")


@dataclass(frozen=True)
class Url:
    """URL constraint: allowed scheme and a non-empty location."""

    schemes: tuple[str, ...] = ("http", "https")

    def __call__(self, value: Any) -> None:
        if not isinstance(value, str):
            raise TypeError("Url validator requires a str")
        parsed = urlparse(value)
        if parsed.scheme not in self.schemes or not parsed.netloc:
            allowed = ", ".join(f"{s}://" for s in self.schemes)
            raise ValueError(f"must be a URL starting with {allowed}")


@dataclass(frozen=True)
class Timestamp:
    """ISO-8601 timestamp text constraint."""

    def __call__(self, value: Any) -> None:
        if not isinstance(value, str):
            raise TypeError("Timestamp validator requires a str")
        try:
            isoparse(value)
        except ValueError:
            raise ValueError("must be an ISO-8601 timestamp") from None


def parse_timestamp(text: str) -> datetime:
    """Parse timestamp text, ISO-8601 first, then any form dateutil knows.

    Accepts e.g. '2024-05-01T12:00:00Z' as well as the RFC 2822 form
    'Wed, 01 May 2024 12:00:00 GMT'.

    Raises:
        ValueError: if the text is not a recognizable date.
    """
    try:
        return isoparse(text)
    except ValueError:
        return parser.parse(text)


# --- Shapes ---


class Shape:
    """Base class for structural data shapes.

    Subclasses only declare annotations. A class attribute default marks
    the key as optional.
    """


def is_shape(tp: Any) -> bool:
    return isinstance(tp, type) and get_origin(tp) is None and issubclass(tp, Shape)


def is_builder(value: Any) -> bool:
    """True if value is a builder instance rather than structural data."""
    return any(safe_is_instance(value, name) for name in BUILDER_CLASS_NAMES)


# --- Type hint parsing utilities ---


def split_annotated(tp: Any) -> tuple[Any, list]:
    """Split Annotated type into base type and validators.

    Args:
        tp: A type annotation, possibly Annotated.

    Returns:
        Tuple of (base_type, validators) where validators are callables.
    """
    if get_origin(tp) is Annotated:
        base, *meta = get_args(tp)
        validators = [m for m in meta if callable(m)]
        return base, validators
    return tp, []


def strip_optional(tp: Any) -> Any:
    """Drop None from an X | None union, returning X."""
    origin = get_origin(tp)
    if origin is types.UnionType or origin is Union:
        args = [t for t in get_args(tp) if t is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def check_type(value: Any, tp: Any) -> bool:
    """Check if value matches the type annotation.

    bool is not accepted where int or float is expected.

    Args:
        value: The value to check.
        tp: The type annotation to check against.

    Returns:
        True if value matches the type, False otherwise.
    """
    tp, _ = split_annotated(tp)

    origin = get_origin(tp)
    args = get_args(tp)

    if tp is Any:
        return True

    if tp is type(None):
        return value is None

    if origin is types.UnionType or origin is Union:
        return any(check_type(value, t) for t in args)

    if is_shape(tp):
        return isinstance(value, dict)

    if origin is None:
        if tp in (int, float) and isinstance(value, bool):
            return False
        if tp is float:
            return isinstance(value, (int, float))
        try:
            return isinstance(value, tp)
        except TypeError:
            return True

    if origin is list:
        if not isinstance(value, list):
            return False
        if not args:
            return True
        return all(check_type(v, args[0]) for v in value)

    try:
        return isinstance(value, origin)
    except TypeError:
        return True


def _type_name(tp: Any) -> str:
    tp = strip_optional(split_annotated(tp)[0])
    if is_shape(tp):
        return "mapping"
    if get_origin(tp) is list:
        return "list"
    return getattr(tp, "__name__", str(tp))


@lru_cache(maxsize=None)
def shape_spec(shape: type[Shape]) -> dict[str, tuple[Any, list, bool, bool]]:
    """Return {key: (base_type, validators, required, nullable)} for a shape class."""
    hints = get_type_hints(shape, include_extras=True)
    result = {}
    for name, tp in hints.items():
        required = not hasattr(shape, name)
        nullable = check_type(None, tp)
        base, validators = split_annotated(strip_optional(tp))
        result[name] = (base, validators, required, nullable)
    return result


def _join(path: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


def check_value(value: Any, tp: Any, validators: list, path: str) -> list[ValidationIssue]:
    """Check one value against its type and validators, recursing into shapes."""
    if is_builder(value):
        return [ValidationIssue(path, value, "expected structural data, got a builder")]

    base = strip_optional(tp)
    # Items of a list are reported one by one below
    type_ok = isinstance(value, list) if get_origin(base) is list else check_type(value, tp)
    if not type_ok:
        return [
            ValidationIssue(path, value, f"expected {_type_name(tp)}, got {type(value).__name__}")
        ]

    issues: list[ValidationIssue] = []
    for v in validators:
        try:
            v(value)
        except (TypeError, ValueError) as e:
            issues.append(ValidationIssue(path, value, str(e)))

    if is_shape(base):
        issues.extend(check_shape(value, base, path))
    elif get_origin(base) is list:
        (item_tp,) = get_args(base) or (Any,)
        item_base, item_validators = split_annotated(strip_optional(item_tp))
        for i, item in enumerate(value):
            issues.extend(check_value(item, item_base, item_validators, _join(path, i)))
    return issues


def check_shape(data: Any, shape: type[Shape], path: str = "") -> list[ValidationIssue]:
    """Return every issue found checking data against shape.

    Keys not declared by the shape are ignored. A missing optional key is
    accepted; a key present with None is only accepted when its hint allows
    None, since absence and null are different things to the remote API.

    Args:
        data: The structural data to check.
        shape: Shape subclass describing the mapping.
        path: Attribute path prefix used in issue reports.

    Returns:
        List of ValidationIssue, empty when data conforms.
    """
    if is_builder(data):
        return [ValidationIssue(path or "<root>", data, "expected structural data, got a builder")]
    if not isinstance(data, dict):
        return [ValidationIssue(path or "<root>", data, f"expected mapping, got {type(data).__name__}")]

    issues: list[ValidationIssue] = []
    for name, (base_type, validators, required, nullable) in shape_spec(shape).items():
        key_path = _join(path, name)
        value = data.get(name)
        if value is None:
            if required:
                issues.append(ValidationIssue(key_path, None, "required attribute is missing"))
            elif name in data and not nullable:
                issues.append(
                    ValidationIssue(key_path, None, f"expected {_type_name(base_type)}, got null")
                )
            continue
        issues.extend(check_value(value, base_type, validators, key_path))
    return issues
