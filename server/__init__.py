"""HTTP server and storage/translation backends for flashcard."""
