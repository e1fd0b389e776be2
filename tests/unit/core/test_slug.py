"""Unit tests for core/utils/slug.py"""

import pytest

from docblock.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
    ("Café Déjà vu", "cafe-deja-vu"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify converts text to lowercase hyphenated slug."""
    assert slugify(text) == expected


def test_slugify_fallback():
    """An empty result is replaced by the fallback."""
    assert slugify("???", fallback="section") == "section"
