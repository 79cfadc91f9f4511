"""Plain-text rendering of a quiz summary."""

from domain.model.quiz import Direction, Question, Summary


def _expected_text(question: Question) -> str:
    if question.direction == Direction.WORD_FROM_MEANING:
        return question.word.word
    if question.word.pronunciation:
        return f"{question.word.meaning} [{question.word.pronunciation}]"
    return question.word.meaning


def render_summary(summary: Summary) -> str:
    """Render totals followed by one ``answer -> expected`` line per miss.

    Example:
        Total: 4, Correct: 3, Mistakes: 1, Performance: 75%
        hause -> Haus
    """
    # round() is half-to-even: 62.5% shows as 62%
    performance = summary.performance or 0.0
    lines = [
        f"\nTotal: {summary.total}, Correct: {summary.correct_count}, "
        f"Mistakes: {summary.mistakes}, Performance: {round(performance)}%\n"
    ]
    if summary.mistakes > 0:
        for question in summary.missed:
            answer = (question.answer or '').strip()
            lines.append(f"{answer} -> {_expected_text(question)}\n")
    return ''.join(lines)
