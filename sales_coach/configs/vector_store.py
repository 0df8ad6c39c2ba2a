"""
Vector store configuration settings.

Selects between the in-process FAISS index and the managed S3 Vectors
index, and carries the remote index coordinates and credentials.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INDEX_NAME = "sales-coach-knowledge"


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (FAISS in memory, or S3 Vectors)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    store_type: str = Field(
        default="memory",
        validation_alias="VECTOR_STORE_TYPE",
        description="Vector store type: 'memory' for in-process FAISS, 's3' for S3 Vectors",
    )
    index_name: str = Field(default=DEFAULT_INDEX_NAME, description="Vector index name")
    vectors_bucket: str = Field(
        default="sales-coach-vectors",
        description="S3 Vectors bucket name",
    )
    aws_region: str = Field(default="ap-northeast-1", description="AWS region for S3 Vectors")
    aws_access_key_id: str | None = Field(
        default=None,
        description="Access key for S3 Vectors (falls back to the boto3 credential chain)",
    )
    aws_secret_access_key: str | None = Field(
        default=None,
        description="Secret key for S3 Vectors",
    )

    top_k: int = Field(default=5, description="Number of context documents to retrieve")
