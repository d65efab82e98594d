"""In-memory vector store for previously generated content."""

import asyncio
import math
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

import structlog

from studio.services.rag.chunker import TextChunker

logger = structlog.get_logger()

EmbedFn = Callable[[str], Awaitable[Sequence[float]]]


@dataclass(frozen=True)
class ChunkEntry:
    """A stored chunk and its embedding."""

    text: str
    embedding: tuple[float, ...]


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """
    Calculate cosine similarity between two vectors.

    Vectors of different length, or with zero magnitude, score 0.0.

    Args:
        vec1: First vector.
        vec2: Second vector.

    Returns:
        Cosine similarity score (-1 to 1).
    """
    if len(vec1) != len(vec2):
        return 0.0

    dot_product = sum(a * b for a, b in zip(vec1, vec2))
    norm1 = math.sqrt(sum(a * a for a in vec1))
    norm2 = math.sqrt(sum(b * b for b in vec2))

    if norm1 == 0 or norm2 == 0:
        return 0.0

    return dot_product / (norm1 * norm2)


class VectorStore:
    """
    Append-only store of embedded chunks with cosine-similarity search.

    Only one ``add_documents`` call runs at a time. A call that arrives
    while another is in flight is dropped, not queued, and searches made
    during an add return nothing.

    Entries are never removed; the store lives as long as its owner.
    """

    def __init__(
        self,
        embed: EmbedFn,
        chunker: TextChunker | None = None,
        similarity_threshold: float = 0.70,
    ) -> None:
        """
        Initialize the store.

        Args:
            embed: Async callable returning an embedding for a text.
                Any exception it raises skips that chunk only.
            chunker: Chunker used to split added documents.
            similarity_threshold: Results must score strictly above this.
        """
        self._embed = embed
        self._chunker = chunker or TextChunker(max_words=100, overlap_words=20)
        self.similarity_threshold = similarity_threshold
        self._entries: list[ChunkEntry] = []
        self._known_texts: set[str] = set()
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def is_busy(self) -> bool:
        """Whether an add is currently in flight."""
        return self._lock.locked()

    def texts(self) -> list[str]:
        """Stored chunk texts in insertion order."""
        return [entry.text for entry in self._entries]

    async def add_documents(self, texts: Sequence[str]) -> None:
        """
        Chunk, embed and store documents.

        Chunks already present (exact text match) are skipped. A chunk whose
        embedding fails, for any reason, is logged and skipped; the rest are
        still stored. Never raises to the caller.

        Args:
            texts: Documents to add.
        """
        if self._lock.locked():
            logger.warning(
                "Context store busy, dropping documents",
                documents=len(texts),
            )
            return

        async with self._lock:
            added = 0
            failed = 0
            for text in texts:
                for chunk in self._chunker.split(text):
                    if chunk in self._known_texts:
                        continue

                    try:
                        embedding = tuple(await self._embed(chunk))
                    except Exception as e:
                        failed += 1
                        logger.warning(
                            "Embedding failed for chunk",
                            chunk_preview=chunk[:80],
                            error=str(e),
                        )
                        continue

                    self._entries.append(ChunkEntry(text=chunk, embedding=embedding))
                    self._known_texts.add(chunk)
                    added += 1

            logger.info(
                "Documents added to context store",
                documents=len(texts),
                chunks_added=added,
                chunks_failed=failed,
                total_chunks=len(self._entries),
            )

    def similarity_search(
        self,
        query_embedding: Sequence[float],
        k: int = 3,
    ) -> list[str]:
        """
        Find stored chunks most similar to a query embedding.

        Args:
            query_embedding: Query vector.
            k: Maximum number of results.

        Returns:
            Chunk texts scoring above the threshold, most similar first.
            Empty when the store is empty or an add is in flight.
        """
        if not self._entries or self._lock.locked():
            return []

        scored = [
            (cosine_similarity(query_embedding, entry.embedding), entry.text)
            for entry in self._entries
        ]
        # sort is stable, so equal scores keep insertion order
        scored.sort(key=lambda item: item[0], reverse=True)

        return [
            text
            for score, text in scored[:k]
            if score > self.similarity_threshold
        ]
