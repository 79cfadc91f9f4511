"""Parsing of word import files.

Format: a header line, then one word per line as
``word;meaning;pronunciation;example;tags`` with comma-separated tags.
"""

from pathlib import Path

from domain.model.word import Word

FIELD_SEPARATOR = ';'
TAG_SEPARATOR = ','
FIELD_COUNT = 5


def parse_line(line: str, language: str) -> Word | None:
    """Parse one data line, or return None if it has no usable word."""
    parts = [p.strip() for p in line.rstrip('\r\n').split(FIELD_SEPARATOR)]
    if len(parts) < FIELD_COUNT:
        return None

    word, meaning, pronunciation, example, tags = parts[:FIELD_COUNT]
    if not word:
        return None

    return Word.create(
        language=language,
        word=word,
        meaning=meaning,
        pronunciation=pronunciation,
        example=example,
        tags=[t.strip() for t in tags.split(TAG_SEPARATOR) if t.strip()],
    )


def parse_word_file(text: str, language: str) -> list[Word]:
    words = []
    for line in text.splitlines()[1:]:
        word = parse_line(line, language)
        if word is not None:
            words.append(word)
    return words


def read_word_file(path: str | Path, language: str) -> list[Word]:
    return parse_word_file(Path(path).read_text(encoding='utf-8'), language)
