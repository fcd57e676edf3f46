import logging

import pytest

from src.utils.logger import resolve_level


@pytest.mark.parametrize("name,expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    ("BASIC_FORMAT", logging.INFO),
    ("nonsense", logging.INFO),
])
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected
