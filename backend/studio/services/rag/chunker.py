"""Word-window text chunking for the context store."""

from studio.core.config import settings


def chunk_text(
    text: str,
    max_words: int = 100,
    overlap_words: int = 20,
) -> list[str]:
    """
    Split text into overlapping word windows.

    Markdown heading markers (``#``) are stripped before the text is split
    on whitespace. Texts that fit in a single window are returned as-is,
    formatting included.

    Once a window reaches the end of the token list it is emitted and
    chunking stops, so a short remainder that the previous window already
    mostly covers is never emitted on its own. This looks accidental but is
    kept so chunk boundaries stay stable.

    Args:
        text: Text to split.
        max_words: Maximum words per chunk.
        overlap_words: Words shared by consecutive chunks. Must be smaller
            than ``max_words``; larger values never advance the window.

    Returns:
        Ordered list of chunk strings.
    """
    words = text.replace("#", "").split()

    if len(words) <= max_words:
        return [text]

    step = max_words - overlap_words
    chunks = []
    start = 0
    while start < len(words):
        end = start + max_words
        chunks.append(" ".join(words[start:end]))
        if end >= len(words):
            break
        start += step

    return chunks


class TextChunker:
    """Chunker bound to configured window sizes."""

    def __init__(
        self,
        max_words: int | None = None,
        overlap_words: int | None = None,
    ) -> None:
        self.max_words = max_words if max_words is not None else settings.CHUNK_MAX_WORDS
        self.overlap_words = (
            overlap_words if overlap_words is not None else settings.CHUNK_OVERLAP_WORDS
        )

    def split(self, text: str) -> list[str]:
        """Split a document into chunks."""
        return chunk_text(text, self.max_words, self.overlap_words)
