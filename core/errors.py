"""
Exceptions raised by the flashcard core.
"""


class FlashcardError(Exception):
    """Base exception for flashcard application."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# Translation errors
# ============================================================================


class TranslationError(FlashcardError):
    """Raised when a translation request cannot produce a result."""
    label = "translation failed"


class EmptyInputError(TranslationError):
    """Raised when there is no text to translate. No request is made."""
    label = "empty input"

    def __init__(self, message: str = "Please enter an English word"):
        super().__init__(message)


class NetworkError(TranslationError):
    """Raised on transport failures and non-2xx responses."""
    label = "network error"


class MalformedResponseError(TranslationError):
    """Raised when the response body has no usable translated text."""
    label = "no translation result"
