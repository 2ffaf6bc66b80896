"""Shared test fixtures."""

import pytest


@pytest.fixture
def mixed_csv() -> str:
    """Contacts CSV with a header, a blank line and three countries."""
    return (
        "name, country, phone\n"
        "                  John Doe, India, 1234567890\n"
        "\n"
        "                  Jane Doe, India, 9876543210\n"
        "                  Kaio Silveira, Portugal, 913111222333"
    )
