"""
Knowledge retrieval.

Embeds a query and returns the nearest knowledge chunks as context
documents. Provider failures never propagate: they degrade to an empty,
flagged result so an answer can still be generated.

Dependencies: langchain_core.embeddings, fastapi.concurrency, sales_coach.boundary.vdb
System role: RAG retrieval business logic
"""

import logging

from fastapi.concurrency import run_in_threadpool
from langchain_core.embeddings import Embeddings

from sales_coach.boundary.vdb.vector_schemas import (
    SOURCE_METADATA_KEY,
    TEXT_METADATA_KEY,
    KnowledgeVectorStore,
    VectorMatch,
)
from sales_coach.models.retrieval import RetrievalResult, RetrievedDocument
from sales_coach.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5
MISSING_TEXT_PLACEHOLDER = "(内容なし)"
MISSING_SOURCE_PLACEHOLDER = "unknown"


def to_retrieved_document(match: VectorMatch) -> RetrievedDocument:
    """Map a store match to a context document, filling absent metadata."""
    metadata = match.metadata or {}
    text = metadata.get(TEXT_METADATA_KEY)
    source = metadata.get(SOURCE_METADATA_KEY)
    return RetrievedDocument(
        text=str(text) if text else MISSING_TEXT_PLACEHOLDER,
        source_label=str(source) if source else MISSING_SOURCE_PLACEHOLDER,
    )


class Retriever:
    """Retrieval business logic."""

    def __init__(
        self,
        embeddings: Embeddings,
        vector_store: KnowledgeVectorStore,
        top_k: int = DEFAULT_TOP_K,
    ) -> None:
        """Initialize retriever with embedding provider and vector store."""
        self._embeddings = embeddings
        self._vector_store = vector_store
        self._top_k = top_k

    async def fetch_context(self, query: str, k: int | None = None) -> RetrievalResult:
        """
        Retrieve context documents for a query.

        Args:
            query: Question text
            k: Number of matches to request (defaults to the configured top_k)

        Returns:
            RetrievalResult: grounded, no_matches, or degraded on provider failure
        """
        top_k = k or self._top_k
        logger.info(
            f"{__name__}:fetch_context - START k={top_k}",
            extra={"query": safe_log_value(query, max_length=100)},
        )

        try:
            query_embedding = await self._embeddings.aembed_query(query)
            matches = await run_in_threadpool(self._vector_store.query, list(query_embedding), top_k)
        except Exception as e:
            logger.warning(
                f"{__name__}:fetch_context - Retrieval degraded: {type(e).__name__}: {e}",
                extra={"error_type": type(e).__name__},
            )
            return RetrievalResult.degraded(e)

        documents = [to_retrieved_document(match) for match in matches]
        if not documents:
            logger.warning(f"{__name__}:fetch_context - No matches found")
        else:
            logger.info(f"{__name__}:fetch_context - END documents={len(documents)}")
        return RetrievalResult.from_documents(documents)
