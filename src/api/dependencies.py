from fastapi import HTTPException, Request

from port.word_repository import WordRepository


def get_word_repo(request: Request) -> WordRepository:
    """Get the word store selected at startup, raising 503 if unavailable."""
    repo = getattr(request.app.state, "word_repo", None)
    if repo is None:
        raise HTTPException(status_code=503, detail="Word store unavailable")
    return repo
