"""Port for word store access."""

from typing import Protocol

from domain.model.quiz import Summary
from domain.model.word import Word


class WordRepository(Protocol):
    """Protocol for vocabulary entries keyed by (language, word)."""

    def has_word(self, language: str, word: str) -> bool:
        """Return True if an entry exists for the key."""
        ...

    def get(self, language: str, word: str) -> Word | None:
        """Get a single entry by key."""
        ...

    def add(self, word: Word) -> Word:
        """Insert a new entry. Raises DuplicateError if the key exists."""
        ...

    def update(self, word: Word) -> Word:
        """Replace meaning, pronunciation, example and tags of an entry.

        The stored score is kept. Raises NotFoundError if the key is absent.
        """
        ...

    def find(self, language: str, tags: list[str] | None = None) -> list[Word]:
        """Get entries of a language having any of the given tags.

        No tags means every entry of the language. Order is random.
        """
        ...

    def save_result(self, summary: Summary) -> None:
        """Apply the score adjustment of every answer in one atomic unit.

        Raises NotFoundError if any answered word is missing (nothing is
        applied) and StorageError on backend failure.
        """
        ...

    def ping(self) -> bool:
        """Return True if the store is reachable."""
        ...
