"""In-memory word collection synchronized to a Storage slot."""

import logging
import threading
from typing import Callable

from .interfaces import Storage
from .models import Word
from .utils import dedup_key

logger = logging.getLogger(__name__)


class WordStore:
    """Authoritative collection of saved words.

    Words are kept in insertion order and unique by lowercased English text.
    Every successful add writes the whole list back to storage. Storage
    failures are logged and never reach the caller; the in-memory list stays
    authoritative for the running process.
    """

    def __init__(self, storage: Storage):
        self.storage = storage
        self._words = []
        self._by_key = {}
        self._subscribers = []
        self._lock = threading.RLock()

    def initialize(self) -> None:
        """Load persisted words. Missing or corrupt data gives an empty store."""
        with self._lock:
            self._words = self._load()
            self._by_key = {dedup_key(w.english): w for w in self._words}
            snapshot = tuple(self._words)
        logger.info(f"Loaded {len(snapshot)} saved words")
        self._notify(snapshot)

    def _load(self) -> list[Word]:
        try:
            data = self.storage.load_words()
        except Exception as e:
            logger.warning(f"Could not read saved words: {e}")
            return []
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning(f"Saved words are not a list ({type(data).__name__}), starting empty")
            return []
        try:
            loaded = [Word.from_dict(item) for item in data]
        except ValueError as e:
            logger.warning(f"Saved words are corrupt, starting empty: {e}")
            return []

        # Keep the first word per dedup key
        words = []
        seen = set()
        for word in loaded:
            key = dedup_key(word.english)
            if key in seen:
                logger.warning(f"Dropping duplicate saved word: {word.english}")
                continue
            seen.add(key)
            words.append(word)
        return words

    def add(self, word: Word) -> bool:
        """Append a word unless one with the same English text exists.

        Returns True if the word was stored, False for a duplicate.
        """
        with self._lock:
            key = dedup_key(word.english)
            if key in self._by_key:
                logger.info(f"Ignoring duplicate word: {word.english}")
                return False
            self._words.append(word)
            self._by_key[key] = word
            self.persist()
            snapshot = tuple(self._words)
        logger.info(f"Saved word: {word.english} = {word.chinese}")
        self._notify(snapshot)
        return True

    def list_words(self) -> tuple[Word, ...]:
        """Current words in insertion order."""
        with self._lock:
            return tuple(self._words)

    def find(self, english: str) -> Word | None:
        """Stored word with the same case-insensitive English text, if any."""
        with self._lock:
            return self._by_key.get(dedup_key(english))

    def __len__(self) -> int:
        with self._lock:
            return len(self._words)

    def persist(self) -> None:
        """Write the current list to storage, best effort."""
        with self._lock:
            try:
                self.storage.save_words([w.to_dict() for w in self._words])
            except Exception as e:
                logger.error(f"Failed to persist {len(self._words)} words: {type(e).__name__}: {e}")

    def subscribe(self, callback: Callable[[tuple], None]) -> Callable[[], None]:
        """Register a callback receiving the snapshot after each change.

        Returns a function that removes the callback.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, snapshot: tuple) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(snapshot)
            except Exception as e:
                logger.error(f"Word store subscriber failed: {type(e).__name__}: {e}")
