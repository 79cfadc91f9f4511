"""Quiz session orchestration.

Pure business logic with no CLI dependencies: answers are read from and
prompts written to any text stream pair.

A session is all-or-nothing: scores are persisted only after every question
has been answered. If the input ends or fails midway, the error propagates
and the store is left untouched.
"""

import logging
from typing import TextIO

from domain.model.errors import InputClosedError, NoWordsFoundError
from domain.model.quiz import Question, Summary
from port.word_repository import WordRepository
from services.grading import is_correct
from services.question_generator import DirectionProvider, generate_questions, random_direction

logger = logging.getLogger(__name__)


def create_quiz(
    repo: WordRepository,
    language: str,
    tags: list[str] | None = None,
    limit: int | None = None,
    choose_direction: DirectionProvider = random_direction,
) -> list[Question]:
    """Build one question per word of ``language`` matching any of ``tags``.

    Args:
        repo: Word store
        language: Quiz language
        tags: Tag filter; empty or None selects every word of the language
        limit: Keep only the ``limit`` lowest-scored words (hardest first)
        choose_direction: Direction provider, random by default

    Raises:
        NoWordsFoundError: the filter matched nothing
    """
    words = repo.find(language, tags or [])
    if not words:
        raise NoWordsFoundError(language, tags)

    if limit is not None and limit > 0:
        # sorted() is stable, so equal scores keep the store's random order
        words = sorted(words, key=lambda w: w.score)[:limit]

    return generate_questions(words, choose_direction)


def _read_answer(reader: TextIO) -> str:
    line = reader.readline()
    if line == '':
        raise InputClosedError("input ended before the quiz was finished")
    return line.rstrip('\r\n')


def run_quiz(questions: list[Question], reader: TextIO, writer: TextIO) -> Summary:
    """Ask every question in order and grade the answers.

    Returns the closed Summary. Nothing is persisted here.
    """
    summary = Summary()

    for question in questions:
        writer.write(question.prompt)
        writer.flush()

        question.record_answer(_read_answer(reader))
        summary.record(question, is_correct(question))

    summary.close()
    return summary


def start_quiz(
    repo: WordRepository,
    language: str,
    tags: list[str] | None,
    reader: TextIO,
    writer: TextIO,
    limit: int | None = None,
    choose_direction: DirectionProvider = random_direction,
) -> Summary:
    """Run a full session: select words, ask, grade, persist score changes."""
    questions = create_quiz(repo, language, tags, limit=limit, choose_direction=choose_direction)
    logger.info("Quiz started", extra={"language": language, "tags": tags or [], "questions": len(questions)})

    summary = run_quiz(questions, reader, writer)
    logger.info("Quiz finished", extra={
        "language": language,
        "total": summary.total,
        "mistakes": summary.mistakes,
    })

    repo.save_result(summary)
    return summary
