"""Translation gateway wrapping the remote translation call."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable

from .config import TRANSLATION_WORKERS
from .errors import EmptyInputError
from .interfaces import Translator

logger = logging.getLogger(__name__)


class TranslationGateway:
    """Turns English input into a translated string via a Translator.

    Failures are reported to the caller and never retried. There is no
    timeout or cancellation beyond what the transport provides, so a request
    that hangs leaves its future pending.
    """

    def __init__(self, translator: Translator, max_workers: int = TRANSLATION_WORKERS):
        self.translator = translator
        self._max_workers = max_workers
        self._executor = None

    def translate(self, text: str) -> str:
        """Translate text, blocking until the remote call completes.

        Raises EmptyInputError (without a request), NetworkError or
        MalformedResponseError.
        """
        if not text:
            raise EmptyInputError()
        logger.info(f"Translating: {text}")
        return self.translator.translate(text)

    def submit(self, text: str, callback: Callable[[Future], None] = None) -> Future:
        """Translate on a worker thread without blocking the caller.

        The returned future resolves with the translated text or the
        translation error. The callback, if given, receives the finished
        future on the worker thread; moving the result to another context
        is up to the caller.
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers,
                thread_name_prefix='translate'
            )
        future = self._executor.submit(self.translate, text)
        if callback is not None:
            future.add_done_callback(callback)
        return future

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None
