"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from domain.model.proficiency import Tier, tier_for
from domain.model.word import Word


class WordRequest(BaseModel):
    """Request model for adding a word."""
    language: str = Field(..., min_length=1, description="Foreign language")
    word: str = Field(..., min_length=1, description="Foreign word (headword)")
    meaning: str = Field(..., min_length=1, description="Translation, several separated by ';'")
    pronunciation: Optional[str] = Field(None, description="How to pronounce the word")
    example: Optional[str] = Field(None, description="Example sentence")
    tags: list[str] = Field(default_factory=list, description="Topics of the word")


class WordUpdateRequest(BaseModel):
    """Request model for updating a word; the key comes from the path."""
    meaning: str = Field(..., min_length=1, description="Translation, several separated by ';'")
    pronunciation: Optional[str] = None
    example: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class WordResponse(BaseModel):
    """Response model for a word."""
    language: str
    word: str
    meaning: str
    pronunciation: str = ""
    example: str = ""
    tags: list[str] = Field(default_factory=list)
    score: float = Field(..., ge=0.0, le=1.0, description="Proficiency score")
    tier: Tier = Field(..., description="Difficulty tier derived from score")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, word: Word) -> "WordResponse":
        return cls(
            language=word.language,
            word=word.word,
            meaning=word.meaning,
            pronunciation=word.pronunciation,
            example=word.example,
            tags=word.tags,
            score=word.score,
            tier=tier_for(word.score),
            created_at=word.created_at,
            updated_at=word.updated_at,
        )


class ImportFailure(BaseModel):
    language: str
    word: str
    reason: str


class ImportResponse(BaseModel):
    """Response model for bulk import."""
    imported: int = Field(..., description="Number of words added or updated")
    failed: list[ImportFailure] = Field(default_factory=list, description="Words that could not be imported")
