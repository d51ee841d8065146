"""Shared fixtures for core unit tests"""

import pytest

from blogpub.core.parse import parse_text


@pytest.fixture(name="outline")
def outline_fixture():
    """Parse markdown text into an outline tree."""
    return parse_text


@pytest.fixture(name="first_item")
def first_item_fixture(outline):
    """Return the first list item of a single-list document."""
    def _first_item(md: str):
        return outline(md).children[0].children[0]
    return _first_item
