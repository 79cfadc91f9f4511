"""MongoDB implementation of WordRepository."""

import random
from datetime import datetime, timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, OperationFailure, PyMongoError

from adapter.mongodb import WORDS_COLLECTION_NAME
from domain.model.errors import DuplicateError, NotFoundError, StorageError
from domain.model.proficiency import MAX_SCORE, MIN_SCORE, SCORE_STEP
from domain.model.quiz import Summary
from domain.model.word import Word

logger = getLogger(__name__)


class MongoWordRepository:
    def __init__(self, db: Database, rng: random.Random | None = None):
        self.collection = db[WORDS_COLLECTION_NAME]
        self._rng = rng or random.Random()

    # ── indexes ────────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for the words collection."""
        try:
            self.collection.create_index(
                [('language', 1), ('word', 1)], name='idx_words_language_word', unique=True,
            )
            self.collection.create_index(
                [('language', 1), ('tags', 1)], name='idx_words_language_tags',
            )
            return True
        except OperationFailure as e:
            # An index with the same keys under another name is good enough
            if "already exists" in str(e):
                logger.warning("Words index already exists with different options", extra={"error": str(e)})
                return True
            logger.error("Failed to create words indexes", extra={"error": str(e)})
            return False
        except PyMongoError as e:
            logger.error("Failed to create words indexes", extra={"error": str(e)})
            return False

    # ── mapping ───────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Word:
        return Word(
            language=doc['language'],
            word=doc['word'],
            meaning=doc['meaning'],
            pronunciation=doc.get('pronunciation') or '',
            example=doc.get('example') or '',
            tags=list(doc.get('tags') or []),
            score=float(doc.get('score', 0.0)),
            created_at=doc.get('created_at') or datetime.now(timezone.utc),
            updated_at=doc.get('updated_at') or datetime.now(timezone.utc),
        )

    @staticmethod
    def _key(language: str, word: str) -> dict:
        return {'language': language, 'word': word}

    # ── read operations ──────────────────────────────────────

    def has_word(self, language: str, word: str) -> bool:
        try:
            return self.collection.count_documents(self._key(language, word), limit=1) > 0
        except PyMongoError as e:
            logger.error("Failed to check word", extra={"language": language, "word": word, "error": str(e)})
            raise StorageError("Failed to check word") from e

    def get(self, language: str, word: str) -> Word | None:
        try:
            doc = self.collection.find_one(self._key(language, word))
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get word", extra={"language": language, "word": word, "error": str(e)})
            raise StorageError("Failed to get word") from e

    def find(self, language: str, tags: list[str] | None = None) -> list[Word]:
        query: dict = {'language': language}
        if tags:
            query['tags'] = {'$in': list(tags)}
        try:
            words = [self._to_domain(doc) for doc in self.collection.find(query)]
        except PyMongoError as e:
            logger.error("Failed to find words", extra={"language": language, "tags": tags, "error": str(e)})
            raise StorageError("Failed to find words") from e
        self._rng.shuffle(words)
        return words

    def ping(self) -> bool:
        try:
            self.collection.database.client.admin.command('ping')
            return True
        except PyMongoError:
            return False

    # ── write operations ─────────────────────────────────────

    def add(self, word: Word) -> Word:
        doc = {
            'language': word.language,
            'word': word.word,
            'meaning': word.meaning,
            'pronunciation': word.pronunciation,
            'example': word.example,
            'tags': list(word.tags),
            'score': word.score,
            'created_at': word.created_at,
            'updated_at': word.updated_at,
        }
        try:
            self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            logger.warning("Word already registered", extra={"language": word.language, "word": word.word})
            raise DuplicateError(f"word {word.word!r} already registered for {word.language!r}") from e
        except PyMongoError as e:
            logger.error("Failed to add word", extra={"language": word.language, "word": word.word, "error": str(e)})
            raise StorageError("Failed to add word") from e

        logger.info("Word added", extra={"language": word.language, "word": word.word})
        return self._to_domain(doc)

    def update(self, word: Word) -> Word:
        try:
            doc = self.collection.find_one_and_update(
                word.identity,
                {'$set': {
                    'meaning': word.meaning,
                    'pronunciation': word.pronunciation,
                    'example': word.example,
                    'tags': list(word.tags),
                    'updated_at': datetime.now(timezone.utc),
                }},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Failed to update word", extra={"language": word.language, "word": word.word, "error": str(e)})
            raise StorageError("Failed to update word") from e

        if doc is None:
            raise NotFoundError(f"word {word.word!r} not registered for {word.language!r}")
        logger.info("Word updated", extra={"language": word.language, "word": word.word})
        return self._to_domain(doc)

    # ── quiz results ─────────────────────────────────────────

    def _apply_adjustments(self, summary: Summary, session) -> None:
        """Conditionally move each answered word's score by one step.

        The filter skips words already at the bound, and the update pipeline
        clamps, so a score never leaves [MIN_SCORE, MAX_SCORE].
        """
        now = datetime.now(timezone.utc)
        for answered in summary.answers:
            word = answered.question.word
            key = word.identity
            if answered.correct:
                condition = {'score': {'$lt': MAX_SCORE}}
                new_score = {'$min': [MAX_SCORE, {'$add': ['$score', SCORE_STEP]}]}
            else:
                condition = {'score': {'$gt': MIN_SCORE}}
                new_score = {'$max': [MIN_SCORE, {'$subtract': ['$score', SCORE_STEP]}]}

            result = self.collection.update_one(
                {**key, **condition},
                [{'$set': {'score': new_score, 'updated_at': now}}],
                session=session,
            )
            if result.matched_count == 0 and self.collection.count_documents(key, limit=1, session=session) == 0:
                raise NotFoundError(f"word {word.word!r} not registered for {word.language!r}")

    def save_result(self, summary: Summary) -> None:
        if not summary.answers:
            return

        client = self.collection.database.client
        try:
            with client.start_session() as session:
                session.with_transaction(lambda s: self._apply_adjustments(summary, s))
        except PyMongoError as e:
            logger.error("Failed to save quiz result", extra={"total": summary.total, "error": str(e)})
            raise StorageError("Failed to save quiz result") from e

        logger.info("Quiz result saved", extra={"total": summary.total, "mistakes": summary.mistakes})
