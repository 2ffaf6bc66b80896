"""Acquisition: filter CSV contact rows by country."""

from acquisition.acquire import acquire_data, iter_contacts
from acquisition.errors import MalformedRowError
from acquisition.rows import parse_row, split_lines, to_contact
from acquisition.types import Contact, MalformedRowPolicy, Row

__all__ = [
    "acquire_data",
    "iter_contacts",
    "parse_row",
    "split_lines",
    "to_contact",
    "Contact",
    "Row",
    "MalformedRowPolicy",
    "MalformedRowError",
]
