"""
In-process FAISS knowledge store.

Ephemeral vector index living inside the server process. Its contents
last only as long as the process.

Dependencies: langchain_community.vectorstores, faiss-cpu
System role: Default (local) vector store backend
"""

import logging

from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings

from sales_coach.boundary.vdb.vector_schemas import (
    SOURCE_METADATA_KEY,
    TEXT_METADATA_KEY,
    VectorMatch,
    VectorRecord,
)
from sales_coach.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class FAISSKnowledgeStore:
    """
    FAISS-backed knowledge store.

    The index is created on the first upsert, since FAISS needs the vector
    dimension up front. Upserting an existing id replaces the stored record.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        index_name: str = "sales-coach-knowledge",
    ) -> None:
        """
        Initialize the store.

        Args:
            embeddings: Embedding provider, used by FAISS for text queries
            index_name: Index name used in log context
        """
        self._embeddings = embeddings
        self._index_name = index_name
        self._index: FAISS | None = None

    def __len__(self) -> int:
        if self._index is None:
            return 0
        return len(self._index.index_to_docstore_id)

    def upsert(self, records: list[VectorRecord]) -> None:
        """
        Insert records, replacing any with the same id.

        Args:
            records: Records with precomputed embeddings

        Raises:
            VectorStoreError: When FAISS rejects the batch (e.g. dimension mismatch)
        """
        if not records:
            return

        text_embeddings = [(record.text, record.embedding) for record in records]
        metadatas = [
            {SOURCE_METADATA_KEY: record.source, "chunk_id": record.id} for record in records
        ]
        ids = [record.id for record in records]

        try:
            if self._index is None:
                self._index = FAISS.from_embeddings(
                    text_embeddings,
                    self._embeddings,
                    metadatas=metadatas,
                    ids=ids,
                )
            else:
                stored_ids = set(self._index.index_to_docstore_id.values())
                replaced = [record_id for record_id in ids if record_id in stored_ids]
                if replaced:
                    self._index.delete(ids=replaced)
                self._index.add_embeddings(text_embeddings, metadatas=metadatas, ids=ids)
        except Exception as e:
            logger.error(f"{__name__}:upsert - {type(e).__name__}: {e}")
            raise VectorStoreError(str(e), operation="upsert", code=type(e).__name__) from e

        logger.info(
            f"{__name__}:upsert - Stored {len(records)} records",
            extra={"index_name": self._index_name, "total": len(self)},
        )

    def query(self, embedding: list[float], top_k: int) -> list[VectorMatch]:
        """
        Nearest-neighbor search by vector.

        Args:
            embedding: Query embedding
            top_k: Maximum number of matches

        Returns:
            list[VectorMatch]: Matches ordered by L2 distance (lower is closer)
        """
        if self._index is None:
            return []

        try:
            results = self._index.similarity_search_with_score_by_vector(embedding, k=top_k)
        except Exception as e:
            logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
            raise VectorStoreError(str(e), operation="query", code=type(e).__name__) from e

        matches = []
        for doc, score in results:
            metadata = dict(doc.metadata or {})
            metadata[TEXT_METADATA_KEY] = doc.page_content
            matches.append(
                VectorMatch(
                    id=metadata.get("chunk_id") or doc.id or "",
                    score=float(score),
                    metadata=metadata,
                )
            )
        return matches
