"""Word domain model."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Word:
    """A single vocabulary entry.

    ``meaning`` may list several acceptable translations separated by ``;``
    (e.g. ``"Man; Husband"``).
    """

    IDENTITY_FIELDS = ('language', 'word')

    language: str
    word: str
    meaning: str
    pronunciation: str = ''
    example: str = ''
    tags: list[str] = field(default_factory=list)
    score: float = 0.0
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def create(
        language: str,
        word: str,
        meaning: str,
        pronunciation: str = '',
        example: str = '',
        tags: list[str] | None = None,
    ) -> 'Word':
        """Factory method for a fresh entry with a zero score."""
        now = _utcnow()
        return Word(
            language=language,
            word=word,
            meaning=meaning,
            pronunciation=pronunciation or '',
            example=example or '',
            tags=list(tags or []),
            score=0.0,
            created_at=now,
            updated_at=now,
        )

    @property
    def key(self) -> tuple[str, str]:
        return self.language, self.word

    @property
    def identity(self) -> dict:
        """Business identity: fields that define uniqueness."""
        return {f: getattr(self, f) for f in self.IDENTITY_FIELDS}
