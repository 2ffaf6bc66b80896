"""Exceptions raised while parsing CSV rows."""


class MalformedRowError(ValueError):
    """Raised when a data line does not split into the expected fields."""

    def __init__(self, line: str, field_count: int, line_number: int | None = None):
        self.line = line
        self.field_count = field_count
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "row"
        super().__init__(f"Malformed {where}: expected 3 fields, got {field_count}: {line!r}")
