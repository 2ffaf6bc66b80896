"""Filter CSV text down to the contacts located in India."""

import logging
from typing import Iterator

from acquisition.errors import MalformedRowError
from acquisition.rows import parse_row, split_lines, to_contact
from acquisition.schema import TARGET_COUNTRY
from acquisition.types import Contact, MalformedRowPolicy

logger = logging.getLogger(__name__)


def iter_contacts(
    text: str,
    on_malformed: MalformedRowPolicy | str = MalformedRowPolicy.SKIP,
) -> Iterator[Contact]:
    """Yield a contact for every data line whose country is India.

    The first line is treated as a header and skipped without inspection.
    Blank lines are ignored. Lines that do not have exactly three fields are
    logged and skipped, or re-raised when on_malformed is RAISE.
    """
    policy = MalformedRowPolicy(on_malformed)

    lines = split_lines(text)
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            row = parse_row(line, line_number)
        except MalformedRowError as e:
            if policy is MalformedRowPolicy.RAISE:
                raise
            logger.warning(
                "Skipping malformed row %d: %r (%d fields)", line_number, line, e.field_count
            )
            continue

        if row.country == TARGET_COUNTRY:
            yield to_contact(row)


def acquire_data(
    text: str,
    on_malformed: MalformedRowPolicy | str = MalformedRowPolicy.SKIP,
) -> list[Contact]:
    """Return the city/phone records of every India row, in input order."""
    contacts = list(iter_contacts(text, on_malformed))
    logger.debug("Acquired %d contacts", len(contacts))
    return contacts
