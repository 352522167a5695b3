"""REST API client for flashcard server."""

import requests


class FlashcardAPIClient:
    """Client for communicating with the flashcard REST API."""

    def __init__(self, base_url: str = "http://localhost:8000"):
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data or {})
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        return self._get("/")

    def list_words(self) -> dict:
        """Get all saved words."""
        return self._get("/api/words")

    def translate(self, text: str) -> dict:
        """Translate an English word."""
        return self._post("/api/translate", {'text': text})

    def save_word(self, english: str, chinese: str) -> dict:
        """Save a word pair."""
        return self._post("/api/words", {'english': english, 'chinese': chinese})

    def start_flashcards(self) -> dict:
        return self._post("/api/flashcard/start")

    def reveal_flashcard(self) -> dict:
        return self._post("/api/flashcard/reveal")

    def next_flashcard(self) -> dict:
        return self._post("/api/flashcard/next")

    def start_quiz(self) -> dict:
        return self._post("/api/quiz/start")

    def answer_quiz(self, answer: str) -> dict:
        return self._post("/api/quiz/answer", {'answer': answer})

    def advance_quiz(self) -> dict:
        return self._post("/api/quiz/advance")


def error_detail(error: requests.RequestException) -> str:
    """Extract the server's error detail from a failed request."""
    response = getattr(error, 'response', None)
    if response is not None:
        try:
            return response.json().get('detail', str(error))
        except ValueError:
            pass
    return str(error)
