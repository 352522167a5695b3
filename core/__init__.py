from .models import Word
from .interfaces import Storage, Translator
from .store import WordStore
from .translation import TranslationGateway
from .drill import FlashcardSession, QuizSession
from .errors import (
    FlashcardError, TranslationError,
    EmptyInputError, NetworkError, MalformedResponseError
)
from .utils import dedup_key
from .config import (
    SOURCE_LANGUAGE, TARGET_LANGUAGE, TRANSLATE_FORMAT,
    STORAGE_KEY, DEFAULT_TRANSLATE_URL
)

__all__ = [
    'Word',
    'Storage', 'Translator',
    'WordStore', 'TranslationGateway',
    'FlashcardSession', 'QuizSession',
    'FlashcardError', 'TranslationError',
    'EmptyInputError', 'NetworkError', 'MalformedResponseError',
    'dedup_key',
    'SOURCE_LANGUAGE', 'TARGET_LANGUAGE', 'TRANSLATE_FORMAT',
    'STORAGE_KEY', 'DEFAULT_TRANSLATE_URL'
]
