"""
Knowledge ingestion pipeline.

Splits raw text into paragraphs, embeds them and upserts them into the
vector store in fixed-size batches. Batches run one after another; the
first failing batch aborts ingestion and its error reaches the caller.

Dependencies: langchain_core.embeddings, fastapi.concurrency, sales_coach.boundary.vdb
System role: Knowledge base write path
"""

import logging
import time
from pathlib import Path

from fastapi.concurrency import run_in_threadpool
from langchain_core.embeddings import Embeddings

from sales_coach.boundary.vdb.vector_schemas import KnowledgeVectorStore, VectorRecord
from sales_coach.core.exceptions import EmbeddingError, ValidationError, VectorStoreError
from sales_coach.core.knowledge.chunker import split_paragraphs
from sales_coach.core.knowledge.uploads import scoped_upload
from sales_coach.models.knowledge import IngestionResult, KnowledgeChunk

logger = logging.getLogger(__name__)

INGEST_BATCH_SIZE = 100
DEFAULT_SOURCE_LABEL = "manual"


def build_chunk_ids(count: int, source_label: str | None, now_ms: int | None = None) -> list[str]:
    """
    Derive unique chunk ids.

    Labelled input uses "{label}-{position}"; unlabelled input uses
    "doc-{epoch_ms}-{position}".
    """
    if source_label:
        prefix = source_label
    else:
        prefix = f"doc-{now_ms if now_ms is not None else int(time.time() * 1000)}"
    return [f"{prefix}-{position}" for position in range(count)]


class KnowledgeIngestor:
    """Chunk, embed and upsert knowledge text."""

    def __init__(
        self,
        embeddings: Embeddings,
        vector_store: KnowledgeVectorStore,
        batch_size: int = INGEST_BATCH_SIZE,
        dimension: int | None = None,
    ) -> None:
        """
        Args:
            embeddings: Embedding provider
            vector_store: Target store
            batch_size: Records per upsert call
            dimension: Expected embedding length; checked on every chunk when set
        """
        self._embeddings = embeddings
        self._vector_store = vector_store
        self._batch_size = batch_size
        self._dimension = dimension

    async def ingest_text(self, raw_text: str, source_label: str | None = None) -> IngestionResult:
        """
        Ingest raw text, one chunk per non-empty paragraph.

        Args:
            raw_text: Text with paragraphs separated by blank lines
            source_label: Optional label; also the id prefix

        Returns:
            IngestionResult: Count and ids of stored chunks

        Raises:
            EmbeddingError: Embedding call failed or returned a wrong-sized vector
            VectorStoreError: Upsert failed (provider message and code attached)
        """
        paragraphs = split_paragraphs(raw_text)
        if not paragraphs:
            logger.info(f"{__name__}:ingest_text - No non-empty paragraphs, nothing to ingest")
            return IngestionResult(accepted_count=0)

        label = source_label or DEFAULT_SOURCE_LABEL
        chunk_ids = build_chunk_ids(len(paragraphs), source_label)
        total_batches = (len(paragraphs) + self._batch_size - 1) // self._batch_size
        stored_ids: list[str] = []

        logger.info(
            f"{__name__}:ingest_text - START paragraphs={len(paragraphs)}, batches={total_batches}",
            extra={"source_label": label},
        )

        for batch_idx in range(total_batches):
            start = batch_idx * self._batch_size
            end = min(start + self._batch_size, len(paragraphs))
            chunks = await self._embed_batch(paragraphs[start:end], chunk_ids[start:end], label)

            records = [
                VectorRecord(id=chunk.id, text=chunk.text, source=chunk.source_label, embedding=chunk.embedding)
                for chunk in chunks
            ]
            try:
                await run_in_threadpool(self._vector_store.upsert, records)
            except VectorStoreError:
                logger.error(f"{__name__}:ingest_text - Batch {batch_idx + 1}/{total_batches} upsert failed")
                raise
            except Exception as e:
                logger.error(f"{__name__}:ingest_text - Batch {batch_idx + 1}/{total_batches} upsert failed: {e}")
                raise VectorStoreError(str(e), operation="upsert", code=type(e).__name__) from e

            stored_ids.extend(record.id for record in records)
            logger.info(f"{__name__}:ingest_text - Batch {batch_idx + 1}/{total_batches} stored ({len(records)} records)")

        return IngestionResult(accepted_count=len(stored_ids), chunk_ids=stored_ids)

    async def _embed_batch(
        self,
        texts: list[str],
        ids: list[str],
        source_label: str,
    ) -> list[KnowledgeChunk]:
        try:
            vectors = await self._embeddings.aembed_documents(texts)
        except Exception as e:
            logger.error(f"{__name__}:_embed_batch - {type(e).__name__}: {e}")
            raise EmbeddingError(str(e), code=type(e).__name__) from e

        if len(vectors) != len(texts):
            raise EmbeddingError(
                f"Embedding provider returned {len(vectors)} vectors for {len(texts)} texts"
            )

        expected = self._dimension or len(vectors[0])
        chunks = []
        for chunk_id, text, vector in zip(ids, texts, vectors):
            if len(vector) != expected:
                raise EmbeddingError(
                    f"Embedding dimension {len(vector)} does not match expected {expected}",
                    details={"chunk_id": chunk_id},
                )
            chunks.append(
                KnowledgeChunk(id=chunk_id, text=text, source_label=source_label, embedding=list(vector))
            )
        return chunks

    async def ingest_file(self, path: str | Path, source_label: str | None = None) -> IngestionResult:
        """
        Ingest an uploaded file's text, deleting the file afterwards.

        The file is removed once read, whether or not ingestion succeeds.

        Args:
            path: Temporary file path
            source_label: Optional label (defaults to the file name)

        Raises:
            ValidationError: File is not UTF-8 text
        """
        with scoped_upload(path) as upload_path:
            try:
                content = await run_in_threadpool(upload_path.read_text, encoding="utf-8")
            except UnicodeDecodeError as e:
                raise ValidationError("ファイルはUTF-8のテキストである必要があります", field="file") from e

        return await self.ingest_text(content, source_label=source_label or upload_path.name)

    async def ingest_seed_file(self, path: str | Path) -> IngestionResult:
        """Ingest a seed knowledge file without deleting it."""
        seed_path = Path(path)
        content = await run_in_threadpool(seed_path.read_text, encoding="utf-8")
        return await self.ingest_text(content, source_label=seed_path.name)
