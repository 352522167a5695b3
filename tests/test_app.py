"""Tests for the flashcard HTTP API."""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from core.config import DEFAULT_TRANSLATE_URL
from core.errors import NetworkError, MalformedResponseError
from server.file_storage import FileStorage
from server import app as app_module
from tests.test_core import MockStorage, MockTranslator


class TestAPI(unittest.TestCase):
    """Tests for server endpoints."""

    def setUp(self):
        self.storage = MockStorage()
        self.translator = MockTranslator()
        app_module.configure(self.storage, self.translator)
        self.client = TestClient(app_module.create_app())

    def save(self, english, chinese):
        response = self.client.post("/api/words", json={'english': english, 'chinese': chinese})
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_health(self):
        self.assertEqual(self.client.get("/").json()['service'], "flashcard")

    def test_words_initially_empty(self):
        self.assertEqual(self.client.get("/api/words").json(), {'total': 0, 'words': []})

    def test_loads_existing_words(self):
        self.storage.set_words([{'id': "w1", 'english': "cat", 'chinese': "貓"}])
        app_module.configure(self.storage, self.translator)
        data = self.client.get("/api/words").json()
        self.assertEqual(data['words'], [{'id': "w1", 'english': "cat", 'chinese': "貓"}])

    def test_translate(self):
        self.translator.set_response("貓")
        response = self.client.post("/api/translate", json={'text': "cat"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'english': "cat", 'chinese': "貓"})

    def test_translate_empty(self):
        response = self.client.post("/api/translate", json={'text': ""})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.translator.translate_calls, [])

    def test_translate_network_error(self):
        self.translator.set_response(NetworkError("refused"))
        response = self.client.post("/api/translate", json={'text': "cat"})
        self.assertEqual(response.status_code, 502)
        self.assertIn("network error", response.json()['detail'])

    def test_translate_malformed(self):
        self.translator.set_response(MalformedResponseError("no translatedText"))
        response = self.client.post("/api/translate", json={'text': "cat"})
        self.assertEqual(response.status_code, 502)
        self.assertIn("no translation result", response.json()['detail'])

    def test_save_and_dedup(self):
        first = self.save("Cat", "貓")
        self.assertTrue(first['added'])
        second = self.save("cat", "喵")
        self.assertFalse(second['added'])
        self.assertEqual(second['word']['chinese'], "貓")
        self.assertEqual(second['total'], 1)
        self.assertEqual(len(self.storage.save_calls), 1)

    def test_drill_requires_session(self):
        self.assertEqual(self.client.post("/api/flashcard/next").status_code, 404)
        self.assertEqual(self.client.post("/api/quiz/advance").status_code, 404)

    def test_flashcard_flow(self):
        self.save("cat", "貓")
        self.save("dog", "狗")
        card = self.client.post("/api/flashcard/start").json()
        self.assertEqual(card['total'], 2)
        self.assertFalse(card['revealed'])
        self.assertEqual(card['face'], card['word']['english'])

        revealed = self.client.post("/api/flashcard/reveal").json()
        self.assertTrue(revealed['revealed'])
        self.assertEqual(revealed['face'], card['word']['chinese'])

        following = self.client.post("/api/flashcard/next").json()
        self.assertNotEqual(following['current_index'], card['current_index'])
        self.assertFalse(following['revealed'])

    def test_flashcard_empty(self):
        card = self.client.post("/api/flashcard/start").json()
        self.assertEqual(card['total'], 0)
        self.assertIsNone(card['face'])
        self.assertIsNone(self.client.post("/api/flashcard/next").json()['current_index'])

    def test_quiz_flow(self):
        self.save("cat", "貓")
        self.save("dog", "狗")
        state = self.client.post("/api/quiz/start").json()
        self.assertEqual(state['prompt'], "cat")
        self.assertIsNone(state['correct_answer'])

        state = self.client.post("/api/quiz/answer", json={'answer': "貓"}).json()
        self.assertTrue(state['last_answer_correct'])

        state = self.client.post("/api/quiz/advance").json()
        self.assertEqual(state['prompt'], "dog")
        self.assertIsNone(state['last_answer_correct'])

        state = self.client.post("/api/quiz/answer", json={'answer': "狗 "}).json()
        self.assertFalse(state['last_answer_correct'])
        self.assertEqual(state['correct_answer'], "狗")

        state = self.client.post("/api/quiz/advance").json()
        self.assertEqual(state['current_index'], 0)

    def test_session_uses_snapshot(self):
        self.save("cat", "貓")
        self.client.post("/api/quiz/start")
        self.save("dog", "狗")
        self.assertEqual(self.client.get("/api/quiz").json()['total'], 1)


class TestCreateTranslator(unittest.TestCase):
    """Tests for building the translator from env and config file."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_file = os.path.join(self.tmp.name, 'config.json')
        self.storage = FileStorage(config_file=self.config_file, state_dir=self.tmp.name)
        env = patch.dict(os.environ, {}, clear=False)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop('LIBRETRANSLATE_URL', None)
        os.environ.pop('LIBRETRANSLATE_API_KEY', None)

    def tearDown(self):
        self.tmp.cleanup()

    def write_config(self, text: str):
        with open(self.config_file, 'w') as f:
            f.write(text)

    def test_missing_config_uses_default(self):
        translator = app_module.create_translator(self.storage)
        self.assertEqual(translator.url, DEFAULT_TRANSLATE_URL)
        self.assertIsNone(translator.api_key)

    def test_config_file_values(self):
        self.write_config(json.dumps({
            'libretranslate_url': "http://localhost:5000/translate",
            'libretranslate_api_key': "secret"
        }))
        translator = app_module.create_translator(self.storage)
        self.assertEqual(translator.url, "http://localhost:5000/translate")
        self.assertEqual(translator.api_key, "secret")

    def test_invalid_json_config_falls_back(self):
        self.write_config("{not json")
        translator = app_module.create_translator(self.storage)
        self.assertEqual(translator.url, DEFAULT_TRANSLATE_URL)

    def test_non_object_config_falls_back(self):
        self.write_config("[1, 2]")
        translator = app_module.create_translator(self.storage)
        self.assertEqual(translator.url, DEFAULT_TRANSLATE_URL)

    def test_env_overrides_broken_config(self):
        self.write_config("{not json")
        os.environ['LIBRETRANSLATE_URL'] = "http://env.test/translate"
        translator = app_module.create_translator(self.storage)
        self.assertEqual(translator.url, "http://env.test/translate")


if __name__ == '__main__':
    unittest.main()
