"""Console client for flashcard server."""
