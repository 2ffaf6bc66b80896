"""Shared types for the acquisition package."""

from enum import Enum
from typing import NamedTuple, TypedDict


class Row(NamedTuple):
    """A parsed data line with its fields trimmed."""

    name: str
    country: str
    phone: str


class Contact(TypedDict):
    city: str
    phone: str


class MalformedRowPolicy(str, Enum):
    """What to do with a data line that does not have exactly three fields."""

    SKIP = "skip"
    RAISE = "raise"
