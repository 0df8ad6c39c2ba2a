"""
Vector database boundary layer.

Provides vector store adapters for storage and retrieval operations.
- FAISSKnowledgeStore: in-process ephemeral index (LangChain FAISS)
- S3VectorsKnowledgeStore: managed remote index (Amazon S3 Vectors via boto3)

Dependencies: langchain_community, boto3
System role: Vector store adapter for RAG retrieval
"""

from sales_coach.boundary.vdb.vector_schemas import (
    KnowledgeVectorStore,
    VectorMatch,
    VectorRecord,
)

__all__ = [
    "KnowledgeVectorStore",
    "VectorMatch",
    "VectorRecord",
]
