"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class Translator(ABC):
    """Abstract base class for the remote translation call."""

    @abstractmethod
    def translate(self, text: str) -> str:
        """Translate English text to Chinese. Returns the translated text.

        Raises NetworkError or MalformedResponseError on failure."""
        pass


class Storage(ABC):
    """Abstract base class for the key-value slot holding saved words."""

    @abstractmethod
    def load_config(self) -> dict:
        """Load configuration. Returns config dict."""
        pass

    @abstractmethod
    def load_words(self) -> list | None:
        """Load the serialized word list. Returns None if absent or unreadable."""
        pass

    @abstractmethod
    def save_words(self, words: list[dict]) -> None:
        """Write the serialized word list, replacing the previous value."""
        pass
