"""Unit tests for the ShortURLModel dataclass in short_url_model.py.

Test coverage includes:

1. Model creation
2. Equality semantics
3. Immutability
"""

from dataclasses import FrozenInstanceError

import pytest

from numshortener.models.short_url_model import ShortURLModel


# -------------------------------------------------
# 1. Model creation
# -------------------------------------------------


def test_valid_short_url_model_creation():
    """Ensure ShortURLModel can be created with valid data and types."""
    short_url = ShortURLModel(original_url='https://www.freecodecamp.org', short_url=1)

    assert short_url.original_url == 'https://www.freecodecamp.org'
    assert short_url.short_url == 1


# -------------------------------------------------
# 2. Equality semantics
# -------------------------------------------------


def test_equal_models():
    """Models with identical data compare (and hash) equal."""
    first = ShortURLModel(original_url='https://www.example.com', short_url=2)
    second = ShortURLModel(original_url='https://www.example.com', short_url=2)

    assert first == second
    assert hash(first) == hash(second)


@pytest.mark.parametrize(
    'original_url, short_url',
    [
        ('https://www.example.com/', 2),
        ('https://www.example.com', 3),
    ],
)
def test_unequal_models(original_url, short_url):
    """Differing URLs or identifiers produce non-equal instances."""
    assert ShortURLModel(original_url='https://www.example.com', short_url=2) != ShortURLModel(
        original_url=original_url, short_url=short_url
    )


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------


@pytest.mark.parametrize('field, value', [('original_url', 'https://evil.example.com'), ('short_url', 42)])
def test_model_is_immutable(field, value):
    """Records can't be modified once created."""
    short_url = ShortURLModel(original_url='https://www.example.com', short_url=2)

    with pytest.raises(FrozenInstanceError):
        setattr(short_url, field, value)
