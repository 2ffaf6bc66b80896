"""Positional layout of the contacts CSV."""

FIELD_DELIMITER = ","
LINE_DELIMITER = "\n"

# name, country, phone
ROW_FIELD_COUNT = 3

TARGET_COUNTRY = "India"
