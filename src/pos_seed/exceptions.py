"""Domain-specific exceptions for POS Seed.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from SeedError for easy catching.
"""


class SeedError(Exception):
    """Base exception for all POS Seed errors.

    Users can catch this exception to handle any error raised by the
    parsers, the API client or the seeders.
    """

    pass


class ConfigError(SeedError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - An environment variable holds a malformed value
    - Required configuration is missing
    """

    pass


class ParseError(SeedError):
    """Raised when a workbook cannot be turned into records at all.

    Odd-looking cells never raise; this is reserved for input where the
    correct result cannot be inferred.
    """

    pass


class NoSheetError(ParseError):
    """Raised when a workbook has no sheets."""

    pass


class MissingFieldError(ParseError):
    """Raised when an item row lacks a mandatory identity field.

    Attributes:
        row_number: 1-based row number of the offending row.
        field: Name of the missing field.
        code: Item code already parsed from the row, if any.
    """

    def __init__(self, row_number: int, field: str, code: str | None = None):
        self.row_number = row_number
        self.field = field
        self.code = code
        msg = f"Row {row_number}: {field} is empty"
        if code:
            msg += f" (KodeItem={code})"
        super().__init__(msg)


class ApiError(SeedError):
    """Raised when the backend REST API fails or answers unexpectedly.

    This exception is raised when:
    - Network connection to the API fails
    - Authentication fails
    - API returns a non-2xx status or an unexpected body
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)
