"""Quiz domain models: questions and session summaries."""

from dataclasses import dataclass, field
from enum import Enum

from domain.model.errors import ValidationError
from domain.model.word import Word


class Direction(str, Enum):
    """Which side of the word the user has to produce."""
    WORD_FROM_MEANING = 'word_from_meaning'
    MEANING_FROM_WORD = 'meaning_from_word'


@dataclass
class Question:
    """One question of a quiz session.

    The word is shared with whoever fetched it and is only read here.
    The answer is recorded once; correctness is derived by grading.
    """
    direction: Direction
    word: Word
    prompt: str
    answer: str | None = None

    @property
    def expected(self) -> str:
        """Raw expected-answer field, possibly holding ``;``-separated forms."""
        if self.direction == Direction.WORD_FROM_MEANING:
            return self.word.word
        return self.word.meaning

    @property
    def answered(self) -> bool:
        return self.answer is not None

    def record_answer(self, answer: str) -> None:
        if self.answered:
            raise ValidationError(f"question for {self.word.word!r} already answered")
        self.answer = answer


@dataclass(frozen=True)
class AnsweredQuestion:
    """A question together with the grading outcome fixed at answer time."""
    question: Question
    correct: bool


@dataclass
class Summary:
    """Outcome of one quiz session, in presentation order."""
    answers: list[AnsweredQuestion] = field(default_factory=list)
    mistakes: int = 0
    closed: bool = False

    def record(self, question: Question, correct: bool) -> None:
        if self.closed:
            raise ValidationError("summary is closed")
        self.answers.append(AnsweredQuestion(question=question, correct=correct))
        if not correct:
            self.mistakes += 1

    def close(self) -> None:
        self.closed = True

    @property
    def total(self) -> int:
        return len(self.answers)

    @property
    def correct_count(self) -> int:
        return self.total - self.mistakes

    @property
    def missed(self) -> list[Question]:
        return [a.question for a in self.answers if not a.correct]

    @property
    def performance(self) -> float | None:
        """Percentage of correct answers, None for an empty session."""
        if self.total == 0:
            return None
        return (1 - self.mistakes / self.total) * 100
