"""
Constants, generated data and JSON fixtures shared by page objects and tests.
"""

from .constants import ASSERTION_TEXTS, BRAND_ALIASES, BRANDS, CATEGORY_IDS, URL_PATHS, VIEWPORTS
from .utils import (
    FixtureNotFoundError,
    generate_random_email,
    generate_random_name,
    generate_random_user,
    load_fixture,
    parse_price,
)

__all__ = [
    "ASSERTION_TEXTS",
    "BRAND_ALIASES",
    "BRANDS",
    "CATEGORY_IDS",
    "URL_PATHS",
    "VIEWPORTS",
    "FixtureNotFoundError",
    "generate_random_email",
    "generate_random_name",
    "generate_random_user",
    "load_fixture",
    "parse_price",
]
