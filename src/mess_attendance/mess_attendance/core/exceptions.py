class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InputMissingError(ValidationError):
    """Raised when no file was uploaded or no filter criteria were given."""


class UnsupportedFormatError(ValidationError):
    """Raised when an uploaded file does not carry a spreadsheet extension."""


class FormatError(ValidationError):
    """Raised when a file cannot be read as tabular data or is too short."""


class HeaderNotFoundError(ValidationError):
    """Raised when no row matches a recognised header layout."""


class MissingColumnError(ValidationError):
    """Raised when a required column cannot be located in the sheet."""

    def __init__(self, column: str):
        super().__init__(f"Could not find the '{column}' column in the sheet")
        self.column = column


class NotFoundError(DomainError):
    """Raised when a query or delete matched no records."""


class PersistenceError(DomainError):
    """Raised when the storage layer fails."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class DatabaseUnavailableError(PersistenceError):
    """Raised when no connection to the database can be opened."""
