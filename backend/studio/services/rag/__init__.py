"""RAG (Retrieval-Augmented Generation) services."""

from studio.services.rag.chunker import TextChunker, chunk_text
from studio.services.rag.vector_store import ChunkEntry, VectorStore, cosine_similarity

__all__ = ["ChunkEntry", "TextChunker", "VectorStore", "chunk_text", "cosine_similarity"]
