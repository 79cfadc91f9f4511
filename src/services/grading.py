"""Answer grading.

An answer is correct when it matches one of the ``;``-separated forms of the
expected field, ignoring case and surrounding whitespace. There is no partial
credit and no fuzzy matching.
"""

from domain.model.quiz import Question

ANSWER_SEPARATOR = ';'


def normalize(text: str) -> str:
    return text.strip().lower()


def accepted_answers(question: Question) -> list[str]:
    """Normalized acceptable answers, blanks dropped."""
    candidates = (normalize(c) for c in question.expected.split(ANSWER_SEPARATOR))
    return [c for c in candidates if c]


def is_correct(question: Question) -> bool:
    if not question.answered:
        return False
    return normalize(question.answer) in accepted_answers(question)
