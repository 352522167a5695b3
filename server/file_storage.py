"""File-based storage implementation."""

import json
import logging
import os
import tempfile

from core.config import STORAGE_KEY
from core.interfaces import Storage

logger = logging.getLogger(__name__)


class FileStorage(Storage):
    """Key-value storage kept in a single JSON file.

    The file holds a JSON object mapping slot names to values; the word list
    lives under STORAGE_KEY.
    """

    def __init__(self, config_file: str = None, state_dir: str = None, key: str = STORAGE_KEY):
        self.config_file = config_file or os.path.expanduser('~/.config/flashcard/config.json')
        self.state_dir = state_dir or os.environ.get(
            'FLASHCARD_STATE_DIR',
            os.path.expanduser('~/.local/share/flashcard')
        )
        self.key = key

    def _get_state_file(self) -> str:
        """Get the path to the key-value file."""
        return os.path.join(self.state_dir, 'flashcard_store.json')

    def load_config(self) -> dict:
        if not os.path.exists(self.config_file):
            raise FileNotFoundError(
                f"Config file not found at {self.config_file}\n"
                f'Optionally create it with: {{"libretranslate_url": "...", "libretranslate_api_key": "..."}}'
            )
        with open(self.config_file, 'r') as f:
            return json.load(f)

    def _load_slots(self) -> dict:
        """Load all slots. Unreadable files count as empty."""
        state_file = self._get_state_file()
        if os.path.exists(state_file):
            try:
                with open(state_file, 'r', encoding='utf-8') as f:
                    slots = json.load(f)
            except Exception as e:
                logger.warning(f"Could not read {state_file}: {e}")
                return {}
            if isinstance(slots, dict):
                return slots
            logger.warning(f"Ignoring {state_file}: top level is not an object")
        return {}

    def _save_slots(self, slots: dict) -> None:
        """Write all slots atomically."""
        os.makedirs(self.state_dir, exist_ok=True)
        state_file = self._get_state_file()
        fd, tmp_path = tempfile.mkstemp(dir=self.state_dir, prefix='.flashcard_store.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(slots, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, state_file)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load_words(self) -> list | None:
        return self._load_slots().get(self.key)

    def save_words(self, words: list[dict]) -> None:
        slots = self._load_slots()
        slots[self.key] = words
        self._save_slots(slots)
