"""Flashcard and quiz drill sessions over a fixed snapshot of words."""

import random

from .models import Word


class FlashcardSession:
    """Random, non-repeating flashcard review.

    A card shows its English side until revealed. Drawing the next card picks
    a random index that differs from the current one whenever there is more
    than one word.
    """

    def __init__(self, words, rng: random.Random = None):
        self.words = tuple(words)
        self.rng = rng or random.Random()
        self.revealed = False
        self.current_index = None
        if self.words:
            self.current_index = self.rng.randrange(len(self.words))

    @property
    def is_empty(self) -> bool:
        return not self.words

    @property
    def current_word(self) -> Word | None:
        if self.current_index is None:
            return None
        return self.words[self.current_index]

    @property
    def face(self) -> str | None:
        """Text currently shown on the card."""
        word = self.current_word
        if word is None:
            return None
        return word.chinese if self.revealed else word.english

    def reveal(self) -> None:
        """Flip the card."""
        if self.is_empty:
            return
        self.revealed = not self.revealed

    def next(self) -> int | None:
        """Draw another card. Returns the new index."""
        if self.is_empty:
            return None
        count = len(self.words)
        new_index = self.rng.randrange(count)
        while count > 1 and new_index == self.current_index:
            new_index = self.rng.randrange(count)
        self.current_index = new_index
        self.revealed = False
        return self.current_index

    def to_dict(self) -> dict:
        word = self.current_word
        return {
            'mode': 'flashcard',
            'total': len(self.words),
            'current_index': self.current_index,
            'revealed': self.revealed,
            'face': self.face,
            'word': word.to_dict() if word else None
        }


class QuizSession:
    """Sequential quiz: show the English term, check the typed Chinese."""

    def __init__(self, words):
        self.words = tuple(words)
        self.current_index = 0 if self.words else None
        self.last_answer_correct = None
        self.last_answer = None

    @property
    def is_empty(self) -> bool:
        return not self.words

    @property
    def current_word(self) -> Word | None:
        if self.current_index is None:
            return None
        return self.words[self.current_index]

    @property
    def prompt(self) -> str | None:
        word = self.current_word
        return word.english if word else None

    def submit(self, answer: str) -> bool | None:
        """Check an answer against the current word.

        Comparison is exact: case, punctuation and whitespace all count.
        """
        word = self.current_word
        if word is None:
            return None
        self.last_answer = answer
        self.last_answer_correct = answer == word.chinese
        return self.last_answer_correct

    def advance(self) -> int | None:
        """Move to the next word, wrapping after the last one."""
        if self.is_empty:
            return None
        self.current_index = (self.current_index + 1) % len(self.words)
        self.last_answer_correct = None
        self.last_answer = None
        return self.current_index

    def to_dict(self) -> dict:
        word = self.current_word
        answered = self.last_answer_correct is not None
        return {
            'mode': 'quiz',
            'total': len(self.words),
            'current_index': self.current_index,
            'prompt': self.prompt,
            'last_answer': self.last_answer,
            'last_answer_correct': self.last_answer_correct,
            # Only reveal the expected answer once the user has tried
            'correct_answer': word.chinese if (word and answered) else None
        }
