"""Question generation: turns stored words into quiz questions."""

import random
from typing import Callable, Iterable

from domain.model.proficiency import tier_for
from domain.model.quiz import Direction, Question
from domain.model.word import Word

DirectionProvider = Callable[[], Direction]

_rng = random.Random()


def random_direction() -> Direction:
    """Pick a question direction uniformly at random."""
    return _rng.choice(list(Direction))


def build_prompt(word: Word, direction: Direction) -> str:
    """Prompt text for ``word`` asked in ``direction``.

    Example:
        [Hard] How do you say "Hello" in german
        [Medium] What does Haus [haʊs] mean?
    """
    tier = tier_for(word.score).value
    if direction == Direction.WORD_FROM_MEANING:
        return f"[{tier}] How do you say \"{word.meaning}\" in {word.language}\n"
    if word.pronunciation:
        return f"[{tier}] What does {word.word} [{word.pronunciation}] mean?\n"
    return f"[{tier}] What does {word.word} mean?\n"


def generate_question(word: Word, choose_direction: DirectionProvider = random_direction) -> Question:
    direction = choose_direction()
    return Question(direction=direction, word=word, prompt=build_prompt(word, direction))


def generate_questions(
    words: Iterable[Word],
    choose_direction: DirectionProvider = random_direction,
) -> list[Question]:
    return [generate_question(word, choose_direction) for word in words]
