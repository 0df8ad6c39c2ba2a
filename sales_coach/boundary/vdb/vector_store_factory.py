"""
Vector store factory for selecting between FAISS (memory) and S3 Vectors.

Depends on the VECTOR_STORE_TYPE setting.
Provides consistent interface regardless of underlying implementation.

Dependencies: sales_coach.boundary.vdb, sales_coach.configs
System role: Vector store instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from sales_coach.boundary.vdb.vector_schemas import KnowledgeVectorStore
from sales_coach.configs.vector_store import VectorStoreSettings
from sales_coach.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_vector_store(
    settings: VectorStoreSettings,
    embeddings: Embeddings,
) -> KnowledgeVectorStore:
    """
    Create the configured vector store.

    Args:
        settings: Vector store settings
        embeddings: Embedding provider (needed by FAISS)

    Returns:
        KnowledgeVectorStore: FAISS or S3 Vectors adapter

    Raises:
        ConfigurationError: If the store type is unknown
    """
    store_type = settings.store_type.lower()

    if store_type == "memory":
        from sales_coach.boundary.vdb.faiss_store import FAISSKnowledgeStore

        logger.info(f"{__name__}:create_vector_store - Creating in-process FAISS store")
        return FAISSKnowledgeStore(embeddings=embeddings, index_name=settings.index_name)

    if store_type == "s3":
        from sales_coach.boundary.vdb.s3_vectors_store import S3VectorsKnowledgeStore

        logger.info(
            f"{__name__}:create_vector_store - Creating S3 Vectors store "
            f"(bucket={settings.vectors_bucket}, index={settings.index_name})"
        )
        return S3VectorsKnowledgeStore(
            vectors_bucket=settings.vectors_bucket,
            index_name=settings.index_name,
            region=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
        )

    raise ConfigurationError(
        f"Invalid VECTOR_STORE_TYPE: {store_type}. Must be 'memory' or 's3'.",
        setting="VECTOR_STORE_TYPE",
    )
