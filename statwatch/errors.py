"""Errors raised while fetching and parsing server statistics."""

from typing import Optional


class StatsError(Exception):
    """Base class for a failed poll. The poller counts every subclass the same way."""


class FetchError(StatsError):
    """The statistics endpoint could not be reached or did not answer with 200."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FormatError(StatsError):
    """The payload did not contain the expected number of fields."""

    def __init__(self, field_count: int, expected: int):
        super().__init__(f"expected {expected} fields, got {field_count}")
        self.field_count = field_count
        self.expected = expected


class NumericError(StatsError):
    """A payload field is not a decimal number."""

    def __init__(self, index: int, value: str):
        super().__init__(f"field {index} is not numeric: {value!r}")
        self.index = index
        self.value = value
