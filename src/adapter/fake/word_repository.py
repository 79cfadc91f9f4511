"""In-memory implementation of WordRepository."""

import random
from dataclasses import replace
from datetime import datetime, timezone

from domain.model.errors import DuplicateError, NotFoundError
from domain.model.proficiency import adjust_score
from domain.model.quiz import Summary
from domain.model.word import Word


class FakeWordRepository:
    def __init__(self, rng: random.Random | None = None):
        self.store: dict[tuple[str, str], Word] = {}
        self._rng = rng or random.Random()

    @staticmethod
    def _copy(word: Word) -> Word:
        return replace(word, tags=list(word.tags))

    # ── read operations ──────────────────────────────────────

    def has_word(self, language: str, word: str) -> bool:
        return (language, word) in self.store

    def get(self, language: str, word: str) -> Word | None:
        entry = self.store.get((language, word))
        return self._copy(entry) if entry else None

    def find(self, language: str, tags: list[str] | None = None) -> list[Word]:
        results = [w for w in self.store.values() if w.language == language]
        if tags:
            wanted = set(tags)
            results = [w for w in results if wanted.intersection(w.tags)]
        results = [self._copy(w) for w in results]
        self._rng.shuffle(results)
        return results

    def ping(self) -> bool:
        return True

    # ── write operations ─────────────────────────────────────

    def add(self, word: Word) -> Word:
        if word.key in self.store:
            raise DuplicateError(f"word {word.word!r} already registered for {word.language!r}")
        self.store[word.key] = self._copy(word)
        return self._copy(word)

    def update(self, word: Word) -> Word:
        existing = self.store.get(word.key)
        if existing is None:
            raise NotFoundError(f"word {word.word!r} not registered for {word.language!r}")

        updated = replace(
            existing,
            meaning=word.meaning,
            pronunciation=word.pronunciation,
            example=word.example,
            tags=list(word.tags),
            updated_at=datetime.now(timezone.utc),
        )
        self.store[word.key] = updated
        return self._copy(updated)

    def save_result(self, summary: Summary) -> None:
        # Check every key first so a missing word leaves the store untouched.
        for answered in summary.answers:
            if answered.question.word.key not in self.store:
                word = answered.question.word
                raise NotFoundError(f"word {word.word!r} not registered for {word.language!r}")

        now = datetime.now(timezone.utc)
        for answered in summary.answers:
            key = answered.question.word.key
            entry = self.store[key]
            self.store[key] = replace(
                entry,
                score=adjust_score(entry.score, answered.correct),
                updated_at=now,
            )
