# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Process-wide validation policy.

Every builder ``to_dict()`` consults this policy unless the call passes an
explicit ``validation_override``:

    - ``True``  always validate
    - ``False`` never validate
    - ``None``  use the process-wide default

The default is read once from the ``EMBED_BUILDERS_VALIDATION`` environment
variable ('0', 'false', 'no' or 'off' disable validation; anything else,
or the variable being unset, enables it).

Example:
    >>> from embed_builders import disable_validators, is_validation_enabled
    >>> disable_validators()
    >>> is_validation_enabled()
    False
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

ENV_VARIABLE = "EMBED_BUILDERS_VALIDATION"
_FALSY = {"0", "false", "no", "off"}


def _default_from_env() -> bool:
    raw = os.getenv(ENV_VARIABLE)
    if raw is None:
        return True
    return raw.strip().lower() not in _FALSY


_validation_enabled: bool = _default_from_env()


def is_validation_enabled() -> bool:
    """Return the process-wide validation default."""
    return _validation_enabled


def set_validation_enabled(enabled: bool) -> None:
    """Set the process-wide validation default."""
    global _validation_enabled
    enabled = bool(enabled)
    if enabled != _validation_enabled:
        logger.debug("embed validation %s", "enabled" if enabled else "disabled")
    _validation_enabled = enabled


def enable_validators() -> None:
    set_validation_enabled(True)


def disable_validators() -> None:
    set_validation_enabled(False)


def resolve_validation(override: bool | None = None) -> bool:
    """Return the effective policy for one serialization call."""
    if override is not None:
        return override
    return _validation_enabled


@contextmanager
def validation_enabled(enabled: bool) -> Iterator[None]:
    """Temporarily set the process-wide policy, restoring it on exit.

    Example:
        >>> with validation_enabled(False):
        ...     EmbedBuilder().to_dict()
        {}
    """
    previous = _validation_enabled
    set_validation_enabled(enabled)
    try:
        yield
    finally:
        set_validation_enabled(previous)
