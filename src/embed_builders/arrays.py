# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Call-shape helpers shared by the 'add many' builder methods."""

from __future__ import annotations

from typing import Any


def normalize_array(args: tuple[Any, ...]) -> list[Any]:
    """Reduce rest-or-array call shapes to one list.

    Builder methods take ``*items`` so callers may pass either individual
    items or a single list/tuple of items:

        >>> normalize_array(([1, 2, 3],))
        [1, 2, 3]
        >>> normalize_array((1, 2, 3))
        [1, 2, 3]
        >>> normalize_array(())
        []

    Args:
        args: The tuple captured by ``*items``.

    Returns:
        A new list with the items in call order.
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return list(args[0])
    return list(args)
