"""Domain-level exceptions.

Services raise these errors to express business rule violations.
The CLI prints them; route handlers map them to HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class NoWordsFoundError(DomainError):
    """A quiz filter matched no words."""

    def __init__(self, language: str, tags: list[str] | None = None):
        self.language = language
        self.tags = tags or []
        if self.tags:
            message = f"no words found for language {language!r} with tags {', '.join(self.tags)}"
        else:
            message = f"no words found for language {language!r}"
        super().__init__(message)


class InputClosedError(DomainError):
    """The answer channel ended before the quiz was finished."""


class StorageError(DomainError):
    """The word store failed to read or write."""
