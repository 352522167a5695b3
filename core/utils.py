"""Utility functions for flashcard application."""


def dedup_key(english: str) -> str:
    """Key used to decide whether a word is already stored."""
    return english.lower()
