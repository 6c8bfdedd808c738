"""Custom exceptions for the diet journal."""


class DietJournalError(Exception):
    """Base exception for all diet journal errors."""

    pass


class ConfigurationError(DietJournalError):
    """Raised when there is a configuration error."""

    pass


class EntryValidationError(DietJournalError):
    """Raised when a draft entry cannot be converted into a journal entry."""

    pass


class ParsingError(DietJournalError):
    """Raised when draft file parsing fails."""

    pass


class OutputError(DietJournalError):
    """Raised when writing derived views fails."""

    pass
