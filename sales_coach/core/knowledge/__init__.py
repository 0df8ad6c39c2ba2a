"""Knowledge ingestion: chunking, embedding and batched upsert."""

from sales_coach.core.knowledge.chunker import split_paragraphs
from sales_coach.core.knowledge.ingestion import INGEST_BATCH_SIZE, KnowledgeIngestor

__all__ = ["INGEST_BATCH_SIZE", "KnowledgeIngestor", "split_paragraphs"]
