"""Word API routes.

Endpoints:
- POST /words: Add a word
- GET /words/{language}/{word}: Get a word
- PUT /words/{language}/{word}: Update a word
- GET /words: List words of a language, optionally filtered by tags
- POST /words/import: Add or update many words at once
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_word_repo
from api.models import ImportFailure, ImportResponse, WordRequest, WordResponse, WordUpdateRequest
from domain.model.errors import DuplicateError, NotFoundError, StorageError, ValidationError
from domain.model.word import Word
from port.word_repository import WordRepository
from services.word_service import add_word, import_words, update_word

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


@router.post("", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
async def create_word(request: WordRequest, repo: WordRepository = Depends(get_word_repo)):
    """Add a new word.

    Raises:
        HTTPException: 409 if the word already exists, 400 on invalid input
    """
    try:
        word = add_word(
            repo,
            request.language,
            request.word,
            request.meaning,
            request.pronunciation or '',
            request.example or '',
            request.tags,
        )
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    logger.info("Word added", extra={"language": word.language, "word": word.word})
    return WordResponse.from_domain(word)


@router.get("/{language}/{word}", response_model=WordResponse)
async def get_word(language: str, word: str, repo: WordRepository = Depends(get_word_repo)):
    """Get a single word with its score and tier.

    Raises:
        HTTPException: 404 if the word is not registered
    """
    try:
        entry = repo.get(language, word)
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"word {word!r} not registered for {language!r}",
        )
    return WordResponse.from_domain(entry)


@router.put("/{language}/{word}", response_model=WordResponse)
async def replace_word(
    language: str,
    word: str,
    request: WordUpdateRequest,
    repo: WordRepository = Depends(get_word_repo),
):
    """Update meaning, pronunciation, example and tags of a word."""
    try:
        updated = update_word(
            repo,
            language,
            word,
            request.meaning,
            request.pronunciation or '',
            request.example or '',
            request.tags,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    return WordResponse.from_domain(updated)


@router.get("", response_model=list[WordResponse])
async def list_words(
    language: str,
    tags: list[str] = Query(default=[]),
    repo: WordRepository = Depends(get_word_repo),
):
    """List words of a language having any of the given tags."""
    try:
        words = repo.find(language, tags)
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return [WordResponse.from_domain(w) for w in words]


@router.post("/import", response_model=ImportResponse)
async def import_word_list(requests: list[WordRequest], repo: WordRepository = Depends(get_word_repo)):
    """Add new words and update existing ones; failures are reported per word."""
    words = [
        Word.create(
            language=r.language,
            word=r.word,
            meaning=r.meaning,
            pronunciation=r.pronunciation or '',
            example=r.example or '',
            tags=r.tags,
        )
        for r in requests
    ]
    failed = import_words(repo, words)
    return ImportResponse(
        imported=len(words) - len(failed),
        failed=[ImportFailure(language=w.language, word=w.word, reason=reason) for w, reason in failed],
    )
