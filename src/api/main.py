"""FastAPI application entry point."""

import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from dotenv import load_dotenv

# Must be called before importing modules that read env vars
load_dotenv()

# Add src to path
# main.py is at src/api/main.py, src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import health, words
from utils.logging import setup_structured_logging
from adapter.word_store import create_word_repo
from domain.model.errors import StorageError

setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
try:
    with open(_project_root / "pyproject.toml", "rb") as f:
        VERSION = tomllib.load(f)["project"]["version"]
except FileNotFoundError:
    VERSION = "unknown"

SERVICE_NAME = "lexiquiz API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: select the word store once on startup."""
    try:
        app.state.word_repo = create_word_repo()
    except StorageError as e:
        logger.warning("Word store unavailable", extra={"error": str(e)})
        app.state.word_repo = None

    yield

    app.state.word_repo = None


app = FastAPI(
    title=SERVICE_NAME,
    description="Vocabulary management for the lexiquiz trainer",
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(words.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }
