"""LibreTranslate translation provider implementation."""

import logging
import time
import requests

from core.interfaces import Translator
from core.config import (
    SOURCE_LANGUAGE, TARGET_LANGUAGE, TRANSLATE_FORMAT,
    DEFAULT_TRANSLATE_URL, TRANSLATED_TEXT_FIELD
)
from core.errors import NetworkError, MalformedResponseError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class LibreTranslateProvider(Translator):
    """Translates English to Chinese through a LibreTranslate endpoint."""

    def __init__(self, url: str = DEFAULT_TRANSLATE_URL, api_key: str = None,
                 session: requests.Session = None):
        self.url = url
        self.api_key = api_key
        self.session = session or requests.Session()

    def _build_payload(self, text: str) -> dict:
        payload = {
            'q': text,
            'source': SOURCE_LANGUAGE,
            'target': TARGET_LANGUAGE,
            'format': TRANSLATE_FORMAT
        }
        if self.api_key:
            payload['api_key'] = self.api_key
        return payload

    def translate(self, text: str) -> str:
        start_time = time.time()
        try:
            response = self.session.post(self.url, json=self._build_payload(text))
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Translation request failed for '{text}': {type(e).__name__}: {e}")
            raise NetworkError(f"Translation request failed: {e}") from e
        ms = int((time.time() - start_time) * 1000)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Translation response is not JSON: {e}")
            logger.error(f"Raw response:\n{response.text}")
            raise MalformedResponseError("Translation response is not valid JSON") from e

        translated = body.get(TRANSLATED_TEXT_FIELD) if isinstance(body, dict) else None
        if not isinstance(translated, str):
            logger.warning(f"Translation response missing '{TRANSLATED_TEXT_FIELD}': {body}")
            raise MalformedResponseError(f"Translation response has no '{TRANSLATED_TEXT_FIELD}'")

        logger.info(f"Translated '{text}' -> '{translated}' in {ms}ms")
        return translated
