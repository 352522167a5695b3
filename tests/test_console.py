"""Tests for the console client."""

import unittest
from unittest.mock import MagicMock, patch

from cli.console import ConsoleUI


class TestConsoleUI(unittest.TestCase):
    """Tests for ConsoleUI main loop."""

    def setUp(self):
        self.client = MagicMock()
        self.client.health_check.return_value = {'service': 'flashcard', 'status': 'ok'}
        self.ui = ConsoleUI(self.client)

    def run_with_input(self, *lines):
        with patch('builtins.input', side_effect=list(lines)), patch('builtins.print'):
            self.ui.run()

    def test_word_sent_as_typed(self):
        self.client.translate.return_value = {'english': " Cat ", 'chinese': "貓"}
        self.run_with_input(" Cat ", "n", "exit")
        self.client.translate.assert_called_once_with(" Cat ")
        self.client.save_word.assert_not_called()

    def test_commands_ignore_surrounding_whitespace(self):
        self.client.list_words.return_value = {'total': 0, 'words': []}
        self.run_with_input("  LIST ", " exit ")
        self.client.list_words.assert_called_once()
        self.client.translate.assert_not_called()

    def test_empty_input_not_translated(self):
        self.run_with_input("", "exit")
        self.client.translate.assert_not_called()

    def test_confirmed_save(self):
        self.client.translate.return_value = {'english': "cat", 'chinese': "貓"}
        self.client.save_word.return_value = {
            'added': True,
            'word': {'id': "w1", 'english': "cat", 'chinese': "貓"},
            'total': 1
        }
        self.run_with_input("cat", "y", "exit")
        self.client.save_word.assert_called_once_with("cat", "貓")


if __name__ == '__main__':
    unittest.main()
