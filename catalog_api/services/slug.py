"""
Slug derivation.

    slugify("Home & Garden")   -> "home-garden"
    slugify("  --Électro 2024") -> "lectro-2024"

Only ASCII letters and digits survive; everything else collapses into a
single hyphen, and hyphens are trimmed from both ends. The result always
matches schemas.common.SLUG_PATTERN or is empty.
"""

import re

_NON_ALPHANUMERIC_RUN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    return _NON_ALPHANUMERIC_RUN.sub("-", text.lower()).strip("-")
