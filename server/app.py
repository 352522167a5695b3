"""FastAPI server for flashcard application."""

import asyncio
import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

logger = logging.getLogger(__name__)

from core.config import DEFAULT_TRANSLATE_URL
from core.drill import FlashcardSession, QuizSession
from core.errors import EmptyInputError, TranslationError
from core.interfaces import Storage, Translator
from core.models import Word
from core.store import WordStore
from core.translation import TranslationGateway

from server.file_storage import FileStorage
from server.libretranslate_provider import LibreTranslateProvider


# Pydantic models for API
class TranslateRequest(BaseModel):
    text: str


class SaveWordRequest(BaseModel):
    english: str
    chinese: str


class AnswerRequest(BaseModel):
    answer: str


class WordResponse(BaseModel):
    id: str
    english: str
    chinese: str


class WordListResponse(BaseModel):
    total: int
    words: list[WordResponse]


class TranslateResponse(BaseModel):
    english: str
    chinese: str


class SaveWordResponse(BaseModel):
    added: bool
    word: WordResponse
    total: int


class FlashcardResponse(BaseModel):
    mode: str
    total: int
    current_index: Optional[int]
    revealed: bool
    face: Optional[str]
    word: Optional[WordResponse]


class QuizResponse(BaseModel):
    mode: str
    total: int
    current_index: Optional[int]
    prompt: Optional[str]
    last_answer: Optional[str]
    last_answer_correct: Optional[bool]
    correct_answer: Optional[str]


# Global state (single user)
store: WordStore = None
gateway: TranslationGateway = None
flashcard_session: FlashcardSession = None
quiz_session: QuizSession = None


def configure(storage: Storage, translator: Translator) -> None:
    """Wire the store and translation gateway, replacing any previous ones."""
    global store, gateway, flashcard_session, quiz_session

    if gateway is not None:
        gateway.shutdown(wait=False)
    store = WordStore(storage)
    store.initialize()
    gateway = TranslationGateway(translator)
    flashcard_session = None
    quiz_session = None


def create_storage() -> Storage:
    """Pick the storage backend from FLASHCARD_STORAGE (file or postgres)."""
    storage_type = os.environ.get('FLASHCARD_STORAGE', 'file')
    if storage_type == 'postgres':
        from server.postgres_storage import PostgresStorage
        logger.info("Using PostgreSQL storage")
        return PostgresStorage()
    logger.info("Using file storage")
    return FileStorage()


def create_translator(storage: Storage) -> Translator:
    """Build the LibreTranslate provider from the environment or config file."""
    config = {}
    try:
        config = storage.load_config()
    except FileNotFoundError:
        pass
    except (ValueError, OSError) as e:
        logger.warning(f"Ignoring unreadable config file: {type(e).__name__}: {e}")
    if not isinstance(config, dict):
        logger.warning(f"Ignoring config file: top level is {type(config).__name__}, not an object")
        config = {}

    url = os.environ.get('LIBRETRANSLATE_URL') or config.get('libretranslate_url') or DEFAULT_TRANSLATE_URL
    api_key = os.environ.get('LIBRETRANSLATE_API_KEY') or config.get('libretranslate_api_key')
    logger.info(f"Translation endpoint: {url}")
    return LibreTranslateProvider(url=url, api_key=api_key)


app = FastAPI(title="Flashcard API", description="English-Chinese vocabulary flashcards")


@app.on_event("startup")
async def startup():
    """Initialize storage and translator on startup."""
    if store is not None:
        return
    storage = create_storage()
    configure(storage, create_translator(storage))


@app.on_event("shutdown")
async def shutdown():
    if gateway is not None:
        gateway.shutdown(wait=False)


@app.get("/")
async def root():
    """Health check."""
    return {"service": "flashcard", "status": "ok"}


@app.get("/api/words", response_model=WordListResponse)
async def list_words():
    """List saved words in the order they were added."""
    words = store.list_words()
    return {
        "total": len(words),
        "words": [w.to_dict() for w in words]
    }


@app.post("/api/translate", response_model=TranslateResponse)
async def translate(request: TranslateRequest):
    """Translate an English word to Chinese."""
    try:
        loop = asyncio.get_event_loop()
        chinese = await loop.run_in_executor(
            None,
            lambda: gateway.translate(request.text)
        )
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=f"{e.label}: {e.message}")
    except TranslationError as e:
        logger.warning(f"Translation failed for '{request.text}': {e.message}")
        raise HTTPException(status_code=502, detail=f"{e.label}: {e.message}")

    return TranslateResponse(english=request.text, chinese=chinese)


@app.post("/api/words", response_model=SaveWordResponse)
async def save_word(request: SaveWordRequest):
    """Save a word pair. Duplicates (case-insensitive English) are ignored."""
    if not request.english:
        raise HTTPException(status_code=400, detail="English text is required")

    word = Word(request.english, request.chinese)
    added = store.add(word)
    if not added:
        # Report the entry that is already stored
        word = store.find(word.english) or word

    return {
        "added": added,
        "word": word.to_dict(),
        "total": len(store)
    }


def get_flashcard_session() -> FlashcardSession:
    if flashcard_session is None:
        raise HTTPException(status_code=404, detail="No active session")
    return flashcard_session


def get_quiz_session() -> QuizSession:
    if quiz_session is None:
        raise HTTPException(status_code=404, detail="No active session")
    return quiz_session


# Flashcard Endpoints
@app.post("/api/flashcard/start", response_model=FlashcardResponse)
async def start_flashcard():
    """Start a flashcard session over the words saved right now."""
    global flashcard_session
    flashcard_session = FlashcardSession(store.list_words())
    return flashcard_session.to_dict()


@app.get("/api/flashcard", response_model=FlashcardResponse)
async def get_flashcard():
    return get_flashcard_session().to_dict()


@app.post("/api/flashcard/reveal", response_model=FlashcardResponse)
async def reveal_flashcard():
    """Flip the current card."""
    session = get_flashcard_session()
    session.reveal()
    return session.to_dict()


@app.post("/api/flashcard/next", response_model=FlashcardResponse)
async def next_flashcard():
    """Draw a different random card."""
    session = get_flashcard_session()
    session.next()
    return session.to_dict()


# Quiz Endpoints
@app.post("/api/quiz/start", response_model=QuizResponse)
async def start_quiz():
    """Start a quiz session over the words saved right now."""
    global quiz_session
    quiz_session = QuizSession(store.list_words())
    return quiz_session.to_dict()


@app.get("/api/quiz", response_model=QuizResponse)
async def get_quiz():
    return get_quiz_session().to_dict()


@app.post("/api/quiz/answer", response_model=QuizResponse)
async def answer_quiz(request: AnswerRequest):
    """Check an answer for the current word."""
    session = get_quiz_session()
    session.submit(request.answer)
    return session.to_dict()


@app.post("/api/quiz/advance", response_model=QuizResponse)
async def advance_quiz():
    """Move on to the next word, wrapping to the first."""
    session = get_quiz_session()
    session.advance()
    return session.to_dict()


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
