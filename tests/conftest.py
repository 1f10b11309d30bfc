# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import pytest

from embed_builders import is_validation_enabled, set_validation_enabled


@pytest.fixture(autouse=True)
def restore_validation_policy():
    """Restore the process-wide validation policy after each test.

    Tests that toggle the policy must not leak it into later tests.
    """
    previous = is_validation_enabled()
    set_validation_enabled(True)
    yield
    set_validation_enabled(previous)


@pytest.fixture
def field_data():
    """Valid structural data for three fields."""
    return [
        {"name": "Tests", "value": "1204 passed", "inline": True},
        {"name": "Coverage", "value": "93%"},
        {"name": "Duration", "value": "4m 12s", "inline": False},
    ]


@pytest.fixture
def embed_data(field_data):
    """Valid structural data for a complete embed."""
    return {
        "title": "Release 2.1",
        "description": "Nightly build finished",
        "url": "https://example.com/builds/812",
        "color": 0x2ECC71,
        "timestamp": "2024-05-01T12:00:00.000Z",
        "image": {"url": "https://example.com/chart.png"},
        "thumbnail": {"url": "attachment://logo.png"},
        "author": {"name": "ci-bot", "icon_url": "https://example.com/bot.png"},
        "footer": {"text": "build #812"},
        "fields": field_data,
    }
