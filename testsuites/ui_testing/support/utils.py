"""
================================================================================
Test Data Utilities
================================================================================

Generators for throw-away accounts and loaders for the static JSON fixtures.

Features:
- Unique e-mail / name generation for sign-up flows
- Complete registration records (generate_random_user)
- JSON fixture loading (users.json, products.json)
- Price parsing for "Rs. 500" style labels

================================================================================
"""

import json
import random
import re
import string
import threading
import time
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict


FIXTURES_DIR = Path(__file__).parent / "fixtures"

DEFAULT_ADDRESS: Dict[str, str] = {
    "firstName": "Test",
    "lastName": "User",
    "address": "123 Test St",
    "country": "United States",
    "state": "California",
    "city": "Los Angeles",
    "zipcode": "90001",
    "mobileNumber": "1234567890",
}

_PRICE_PATTERN = re.compile(r"\d+(?:[.,]\d+)*")

_email_lock = threading.Lock()
_last_email_ms = 0
_email_sequence = 0


class FixtureNotFoundError(FileNotFoundError):
    """Raised when a JSON fixture file does not exist."""
    pass


def _random_string(length: int = 8) -> str:
    """Generate random lower-case alphanumeric string."""
    chars = string.ascii_lowercase + string.digits
    return "".join(random.choice(chars) for _ in range(length))


def generate_random_email(domain: str = "example.com") -> str:
    """
    Return ``user_<epoch-ms>@<domain>``.

    Two calls in the same millisecond get a ``_<n>`` suffix so every
    address handed out by this process is unique.
    """
    global _last_email_ms, _email_sequence

    with _email_lock:
        now_ms = int(time.time() * 1000)
        if now_ms <= _last_email_ms:
            _email_sequence += 1
            now_ms = _last_email_ms
        else:
            _email_sequence = 0
            _last_email_ms = now_ms
        suffix = f"_{_email_sequence}" if _email_sequence else ""

    return f"user_{now_ms}{suffix}@{domain}"


def generate_random_name() -> str:
    """Return ``User<0..9999>``."""
    return f"User{random.randint(0, 9999)}"


def generate_random_password() -> str:
    return f"password_{_random_string(8)}"


def generate_random_user(**overrides: Any) -> Dict[str, Any]:
    """
    Build a complete sign-up + registration record.

    Args:
        **overrides: Field overrides (e.g. password="secret")

    Returns:
        Dict with name, email, password and the address block
    """
    user: Dict[str, Any] = {
        "name": generate_random_name(),
        "email": generate_random_email(),
        "password": generate_random_password(),
        **DEFAULT_ADDRESS,
    }
    user.update(overrides)
    return user


@lru_cache(maxsize=None)
def _read_fixture(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def load_fixture(name: str) -> Dict[str, Any]:
    """
    Load a JSON fixture from ``support/fixtures``.

    Args:
        name: File name with or without ``.json``

    Returns:
        A fresh copy of the parsed JSON (callers may mutate it)

    Raises:
        FixtureNotFoundError: if the file does not exist
    """
    filename = name if name.endswith(".json") else f"{name}.json"
    path = FIXTURES_DIR / filename
    if not path.exists():
        raise FixtureNotFoundError(f"Fixture not found: {path}")
    return json.loads(_read_fixture(path))


def parse_price(text: str) -> float:
    """
    Extract the numeric amount from a price label.

    >>> parse_price("Rs. 1,500")
    1500.0

    Raises:
        ValueError: if the text holds no number
    """
    match = _PRICE_PATTERN.search(text or "")
    if not match:
        raise ValueError(f"No price found in: {text!r}")
    return float(match.group(0).replace(",", ""))


__all__ = [
    "DEFAULT_ADDRESS",
    "FIXTURES_DIR",
    "FixtureNotFoundError",
    "generate_random_email",
    "generate_random_name",
    "generate_random_password",
    "generate_random_user",
    "load_fixture",
    "parse_price",
]
