"""Configuration constants for flashcard application."""

SOURCE_LANGUAGE = 'en'
TARGET_LANGUAGE = 'zh'
TRANSLATE_FORMAT = 'text'

# Persistence
STORAGE_KEY = 'SavedWords'    # Key-value slot holding the serialized word list

# Translation endpoint
DEFAULT_TRANSLATE_URL = 'https://libretranslate.com/translate'
TRANSLATED_TEXT_FIELD = 'translatedText'

# Worker threads for non-blocking translation requests
TRANSLATION_WORKERS = 2
