"""PostgreSQL storage implementation."""

import json
import logging
import os
import psycopg2
from psycopg2.extras import RealDictCursor

from core.config import STORAGE_KEY
from core.interfaces import Storage

logger = logging.getLogger(__name__)


class PostgresStorage(Storage):
    """PostgreSQL-backed key-value storage.

    Each slot is one row of the kv_store table; the word list is stored as
    JSONB under STORAGE_KEY.
    """

    def __init__(self, config_file: str = None, db_url: str = None, key: str = STORAGE_KEY):
        self.config_file = config_file or os.path.expanduser('~/.config/flashcard/config.json')
        self.db_url = db_url or os.environ.get(
            'DATABASE_URL',
            'postgresql://localhost:5432/flashcard'
        )
        self.key = key
        self._conn = None
        self._initialized = False

    @property
    def conn(self):
        """Lazy connection initialization."""
        if self._conn is None or self._conn.closed:
            self._conn = psycopg2.connect(self.db_url)
            if not self._initialized:
                self._init_db()
                self._initialized = True
        return self._conn

    def _init_db(self):
        """Create tables if they don't exist."""
        with self._conn.cursor() as cur:
            cur.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key VARCHAR(255) PRIMARY KEY,
                    value JSONB NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
        self._conn.commit()

    def close(self):
        """Close the database connection."""
        if self._conn and not self._conn.closed:
            self._conn.close()

    def load_config(self) -> dict:
        if not os.path.exists(self.config_file):
            raise FileNotFoundError(
                f"Config file not found at {self.config_file}\n"
                f'Optionally create it with: {{"libretranslate_url": "...", "libretranslate_api_key": "..."}}'
            )
        with open(self.config_file, 'r') as f:
            return json.load(f)

    def load_words(self) -> list | None:
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(
                    "SELECT value FROM kv_store WHERE key = %s",
                    (self.key,)
                )
                row = cur.fetchone()
                if row:
                    return row['value']
                return None
        except Exception as e:
            logger.warning(f"Error loading words: {e}")
            return None

    def save_words(self, words: list[dict]) -> None:
        try:
            with self.conn.cursor() as cur:
                cur.execute("""
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (%s, %s, CURRENT_TIMESTAMP)
                    ON CONFLICT (key)
                    DO UPDATE SET value = EXCLUDED.value, updated_at = CURRENT_TIMESTAMP
                """, (self.key, json.dumps(words, ensure_ascii=False)))
            self.conn.commit()
        except Exception as e:
            logger.error(f"Error saving words: {e}")
            if self._conn and not self._conn.closed:
                self._conn.rollback()
            raise
