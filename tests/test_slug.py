"""
Catalog API — Slug Derivation Tests
====================================

What we test:
    ✅ Lowercasing and hyphen collapsing
    ✅ Trimming of leading/trailing separators
    ✅ Inputs with no alphanumerics give an empty slug
    ✅ Every non-empty result matches the slug pattern
"""

import re

import pytest

from catalog_api.schemas.common import SLUG_PATTERN
from catalog_api.services.slug import slugify


class TestSlugify:

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Electronics", "electronics"),
            ("Home & Garden", "home-garden"),
            ("  Wireless   Mouse Pro!  ", "wireless-mouse-pro"),
            ("--Back-to-School--", "back-to-school"),
            ("Grade 5 (2024)", "grade-5-2024"),
            ("Électronique", "lectronique"),
        ],
    )
    def test_derives_expected_slug(self, text, expected):
        assert slugify(text) == expected

    @pytest.mark.parametrize("text", ["", "!!!", "   ", "---", "éàü"])
    def test_nothing_alphanumeric_gives_empty(self, text):
        assert slugify(text) == ""

    def test_result_matches_slug_pattern(self):
        for text in ["A  B", "x__y", "Sports & Outdoors / Kids", "123 go"]:
            assert re.fullmatch(SLUG_PATTERN, slugify(text))

    def test_idempotent(self):
        slug = slugify("Back To School 2024")
        assert slugify(slug) == slug
