"""Line and row parsing helpers."""

from acquisition.errors import MalformedRowError
from acquisition.schema import FIELD_DELIMITER, LINE_DELIMITER, ROW_FIELD_COUNT
from acquisition.types import Contact, Row


def split_lines(text: str) -> list[str]:
    """Split CSV text into lines on newline characters only."""
    return text.split(LINE_DELIMITER)


def parse_row(line: str, line_number: int | None = None) -> Row:
    """Parse a data line into a Row.

    Raises MalformedRowError unless the line has exactly ROW_FIELD_COUNT fields.
    """
    fields = line.split(FIELD_DELIMITER)
    if len(fields) != ROW_FIELD_COUNT:
        raise MalformedRowError(line, len(fields), line_number)
    name, country, phone = (field.strip() for field in fields)
    return Row(name, country, phone)


def to_contact(row: Row) -> Contact:
    return {"city": row.name, "phone": row.phone}
