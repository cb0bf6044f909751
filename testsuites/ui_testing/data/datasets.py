"""
================================================================================
Storefront Test Data
================================================================================

Centralized test data for the storefront scenarios.

Features:
- Static user, search, category and listing option tables
- Invalid input tables for negative testing
- Unique email and random user generators for registration

All tables are tuples of frozen dataclasses and cannot be modified at
runtime.

================================================================================
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from testsuites.ui_testing.pages.register_page import RegistrationData


# ================================================================================
# Models
# ================================================================================

@dataclass(frozen=True)
class UserData:
    """
    A storefront customer.

    Attributes:
        first_name: Given name
        last_name: Family name
        email: Login email, unique per registered account
        password: Account password
        gender: "Male" or "Female", empty to skip
        newsletter: Newsletter opt-in, None to leave the form default
        company: Company name, empty to skip
    """
    first_name: str
    last_name: str
    email: str
    password: str
    gender: str = ""
    newsletter: Optional[bool] = None
    company: str = ""

    def to_registration(self) -> RegistrationData:
        """Registration form values; the confirmation repeats the password."""
        return RegistrationData(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            password=self.password,
            confirm_password=self.password,
            gender=self.gender,
            newsletter=self.newsletter,
            company=self.company,
        )


@dataclass(frozen=True)
class SearchData:
    """A search term with optional filters and its expected result count."""
    search_term: str
    category: Optional[str] = None
    manufacturer: Optional[str] = None
    price_from: Optional[str] = None
    price_to: Optional[str] = None
    expected_results: Optional[int] = None


@dataclass(frozen=True)
class PriceRange:
    price_from: str
    price_to: str


@dataclass(frozen=True)
class SelectOption:
    """A `<select>` option as (value, visible text)."""
    value: str
    text: str


# ================================================================================
# Static Tables
# ================================================================================

TEST_USERS: Tuple[UserData, ...] = (
    UserData(
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
        password="Test123!",
        gender="Male",
        newsletter=True,
        company="Test Company",
    ),
    UserData(
        first_name="Jane",
        last_name="Smith",
        email="jane.smith@example.com",
        password="Test456!",
        gender="Female",
        newsletter=False,
        company="Another Company",
    ),
)

SEARCH_TEST_DATA: Tuple[SearchData, ...] = (
    SearchData("computer", expected_results=10),
    SearchData("laptop", category="Computers", expected_results=5),
    SearchData("phone", category="Electronics", manufacturer="Apple", expected_results=3),
    SearchData("book", category="Books", price_from="10", price_to="50", expected_results=8),
    SearchData("jewelry", category="Jewelry", expected_results=6),
    SearchData("nonexistentproduct", expected_results=0),
)

CATEGORIES: Tuple[str, ...] = (
    "Computers",
    "Electronics",
    "Apparel",
    "Digital downloads",
    "Books",
    "Jewelry",
    "Gift Cards",
)

MANUFACTURERS: Tuple[str, ...] = ("Apple", "HP", "Nike")

PRICE_RANGES: Tuple[PriceRange, ...] = (
    PriceRange("0", "100"),
    PriceRange("100", "500"),
    PriceRange("500", "1000"),
    PriceRange("1000", "2000"),
    PriceRange("2000", "5000"),
)

SORT_OPTIONS: Tuple[SelectOption, ...] = (
    SelectOption("0", "Position"),
    SelectOption("5", "Name: A to Z"),
    SelectOption("6", "Name: Z to A"),
    SelectOption("10", "Price: Low to High"),
    SelectOption("11", "Price: High to Low"),
    SelectOption("15", "Created on"),
)

PAGE_SIZES: Tuple[SelectOption, ...] = (
    SelectOption("3", "3"),
    SelectOption("6", "6"),
    SelectOption("9", "9"),
)

GENDER_OPTIONS: Tuple[str, ...] = ("Male", "Female")

RANDOM_SEARCH_TERMS: Tuple[str, ...] = (
    "computer", "laptop", "phone", "book", "jewelry", "gift card",
)

# ================================================================================
# Invalid Input
# ================================================================================

INVALID_EMAILS: Tuple[str, ...] = (
    "invalid-email",
    "test@",
    "@example.com",
    "test..test@example.com",
)

INVALID_PASSWORDS: Tuple[str, ...] = (
    "123",          # too short
    "password",     # no uppercase
    "PASSWORD",     # no lowercase
    "Password",     # no digits
    "Password123",  # no special characters
)

DEFAULT_PASSWORD = "Test123!"


# ================================================================================
# Generators
# ================================================================================

def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def generate_unique_email(prefix: str = "test") -> str:
    """
    Generate an email address unlikely to exist on the storefront.

    Format: ``{prefix}{epoch_ms}{0-999}@example.com``
    """
    return f"{prefix}{_timestamp_ms()}{random.randint(0, 999)}@example.com"


def random_gender() -> str:
    return random.choice(GENDER_OPTIONS)


def generate_random_user() -> UserData:
    """A fresh user with a unique email, ready for registration."""
    timestamp = _timestamp_ms()
    return UserData(
        first_name=f"Test{timestamp}",
        last_name=f"User{timestamp}",
        email=generate_unique_email(),
        password=DEFAULT_PASSWORD,
        gender=random_gender(),
        newsletter=True,
        company=f"Company{timestamp}",
    )


def random_search_term() -> str:
    return random.choice(RANDOM_SEARCH_TERMS)


def random_category() -> str:
    return random.choice(CATEGORIES)


def random_manufacturer() -> str:
    return random.choice(MANUFACTURERS)


def random_price_range() -> PriceRange:
    return random.choice(PRICE_RANGES)


__all__ = [
    "CATEGORIES",
    "GENDER_OPTIONS",
    "INVALID_EMAILS",
    "INVALID_PASSWORDS",
    "MANUFACTURERS",
    "PAGE_SIZES",
    "PRICE_RANGES",
    "SEARCH_TEST_DATA",
    "SORT_OPTIONS",
    "TEST_USERS",
    "PriceRange",
    "SearchData",
    "SelectOption",
    "UserData",
    "generate_random_user",
    "generate_unique_email",
    "random_category",
    "random_gender",
    "random_manufacturer",
    "random_price_range",
    "random_search_term",
]
