"""
S3 Vectors knowledge store.

Managed remote index on Amazon S3 Vectors. Records are written with
put_vectors and searched with query_vectors; chunk text and source label
travel as vector metadata, so the index must declare "text" as a
non-filterable metadata key.

Dependencies: boto3, botocore
System role: Production vector store backend
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sales_coach.boundary.vdb.vector_schemas import VectorMatch, VectorRecord
from sales_coach.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


def _to_store_error(exc: Exception, operation: str) -> VectorStoreError:
    """Carry the provider's message and code into a VectorStoreError."""
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        return VectorStoreError(
            error.get("Message") or str(exc),
            operation=operation,
            code=error.get("Code"),
        )
    return VectorStoreError(str(exc), operation=operation, code=type(exc).__name__)


class S3VectorsKnowledgeStore:
    """S3 Vectors index adapter."""

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str,
        region: str = "ap-northeast-1",
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        client=None,
    ) -> None:
        """
        Initialize S3 Vectors client.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            region: AWS region
            aws_access_key_id: Optional explicit access key
            aws_secret_access_key: Optional explicit secret key
            client: Preconfigured boto3 s3vectors client
        """
        self._vectors_bucket = vectors_bucket
        self._index_name = index_name
        self._client = client or boto3.client(
            "s3vectors",
            region_name=region,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
        )

    def upsert(self, records: list[VectorRecord]) -> None:
        """
        Put records into the index; existing keys are overwritten.

        Raises:
            VectorStoreError: With the provider's error message and code
        """
        if not records:
            return

        vectors = [
            {
                "key": record.id,
                "data": {"float32": [float(value) for value in record.embedding]},
                "metadata": record.metadata(),
            }
            for record in records
        ]
        try:
            self._client.put_vectors(
                vectorBucketName=self._vectors_bucket,
                indexName=self._index_name,
                vectors=vectors,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:upsert - {type(e).__name__}: {e}")
            raise _to_store_error(e, "upsert") from e

        logger.info(
            f"{__name__}:upsert - Put {len(vectors)} vectors",
            extra={"index_name": self._index_name},
        )

    def query(self, embedding: list[float], top_k: int) -> list[VectorMatch]:
        """
        Query the index for the nearest vectors with metadata.

        Raises:
            VectorStoreError: With the provider's error message and code
        """
        try:
            response = self._client.query_vectors(
                vectorBucketName=self._vectors_bucket,
                indexName=self._index_name,
                queryVector={"float32": [float(value) for value in embedding]},
                topK=top_k,
                returnMetadata=True,
                returnDistance=True,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
            raise _to_store_error(e, "query") from e

        return [
            VectorMatch(
                id=vector.get("key", ""),
                score=vector.get("distance"),
                metadata=vector.get("metadata") or {},
            )
            for vector in response.get("vectors", [])
        ]
