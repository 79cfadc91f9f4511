"""Word service: add, update and import vocabulary entries.

Raises domain errors that the CLI and route handlers translate.
"""

import logging

from domain.model.errors import DomainError, DuplicateError, NotFoundError, ValidationError
from domain.model.word import Word
from port.word_repository import WordRepository

logger = logging.getLogger(__name__)


def _clean_tags(tags: list[str] | None) -> list[str]:
    return [t.strip() for t in tags or [] if t and t.strip()]


def _build_word(
    language: str,
    word: str,
    meaning: str,
    pronunciation: str = '',
    example: str = '',
    tags: list[str] | None = None,
) -> Word:
    language = (language or '').strip()
    word = (word or '').strip()
    meaning = (meaning or '').strip()
    if not language:
        raise ValidationError("language is required")
    if not word:
        raise ValidationError("word is required")
    if not meaning:
        raise ValidationError("meaning is required")

    return Word.create(
        language=language,
        word=word,
        meaning=meaning,
        pronunciation=(pronunciation or '').strip(),
        example=(example or '').strip(),
        tags=_clean_tags(tags),
    )


def add_word(
    repo: WordRepository,
    language: str,
    word: str,
    meaning: str,
    pronunciation: str = '',
    example: str = '',
    tags: list[str] | None = None,
) -> Word:
    """Register a new word with a zero score.

    Raises:
        ValidationError: language, word or meaning is blank
        DuplicateError: word already registered for the language
    """
    entry = _build_word(language, word, meaning, pronunciation, example, tags)
    if repo.has_word(entry.language, entry.word):
        raise DuplicateError(f"word {entry.word!r} already registered for {entry.language!r}")
    return repo.add(entry)


def update_word(
    repo: WordRepository,
    language: str,
    word: str,
    meaning: str,
    pronunciation: str = '',
    example: str = '',
    tags: list[str] | None = None,
) -> Word:
    """Replace meaning, pronunciation, example and tags of a registered word.

    Raises:
        ValidationError: language, word or meaning is blank
        NotFoundError: word not registered for the language
    """
    entry = _build_word(language, word, meaning, pronunciation, example, tags)
    if not repo.has_word(entry.language, entry.word):
        raise NotFoundError(f"word {entry.word!r} not registered for {entry.language!r}")
    return repo.update(entry)


def import_words(repo: WordRepository, words: list[Word]) -> list[tuple[Word, str]]:
    """Add new words and update existing ones.

    Returns (word, failure reason) pairs in input order; empty when all
    succeeded.
    """
    failed: list[tuple[Word, str]] = []
    for w in words:
        try:
            if repo.has_word(w.language, w.word):
                update_word(repo, w.language, w.word, w.meaning, w.pronunciation, w.example, w.tags)
            else:
                add_word(repo, w.language, w.word, w.meaning, w.pronunciation, w.example, w.tags)
        except DomainError as e:
            failed.append((w, str(e)))

    logger.info("Words imported", extra={"imported": len(words) - len(failed), "failed": len(failed)})
    return failed
