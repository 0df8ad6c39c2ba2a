"""
Test suite for S3VectorsKnowledgeStore.

The boto3 client is mocked; tests check request shape and error mapping.

Dependencies: pytest, botocore
System role: Remote vector store verification
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from sales_coach.boundary.vdb.s3_vectors_store import S3VectorsKnowledgeStore
from sales_coach.boundary.vdb.vector_schemas import VectorRecord
from sales_coach.core.exceptions import VectorStoreError


@pytest.fixture
def mock_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def store(mock_client) -> S3VectorsKnowledgeStore:
    return S3VectorsKnowledgeStore(
        vectors_bucket="test-bucket",
        index_name="test-index",
        client=mock_client,
    )


def _client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class TestUpsert:
    """Test suite for put_vectors."""

    def test_records_are_sent_with_metadata(self, store, mock_client):
        # Arrange
        record = VectorRecord(id="faq-0", text="本文", source="faq", embedding=[0.1, 0.2])

        # Act
        store.upsert([record])

        # Assert
        kwargs = mock_client.put_vectors.call_args.kwargs
        assert kwargs["vectorBucketName"] == "test-bucket"
        assert kwargs["indexName"] == "test-index"
        assert kwargs["vectors"] == [
            {"key": "faq-0", "data": {"float32": [0.1, 0.2]}, "metadata": {"text": "本文", "source": "faq"}}
        ]

    def test_empty_batch_makes_no_call(self, store, mock_client):
        store.upsert([])

        mock_client.put_vectors.assert_not_called()

    def test_client_error_carries_code_and_message(self, store, mock_client):
        """
        Test provider diagnostics survive the error mapping.

        Arrange: put_vectors raising ClientError
        Act: Upsert
        Assert: VectorStoreError with the provider's code and message
        """
        # Arrange
        mock_client.put_vectors.side_effect = _client_error(
            "ValidationException", "Invalid vector dimension", "PutVectors"
        )

        # Act
        with pytest.raises(VectorStoreError) as exc_info:
            store.upsert([VectorRecord(id="a", text="t", source="s", embedding=[0.0])])

        # Assert
        assert exc_info.value.code == "ValidationException"
        assert exc_info.value.message == "Invalid vector dimension"
        assert exc_info.value.operation == "upsert"


class TestQuery:
    """Test suite for query_vectors."""

    def test_matches_are_mapped(self, store, mock_client):
        mock_client.query_vectors.return_value = {
            "vectors": [
                {"key": "faq-0", "distance": 0.12, "metadata": {"text": "本文", "source": "faq"}},
                {"key": "faq-1"},
            ]
        }

        matches = store.query([0.1, 0.2], top_k=2)

        assert [match.id for match in matches] == ["faq-0", "faq-1"]
        assert matches[0].score == pytest.approx(0.12)
        assert matches[1].metadata == {}
        kwargs = mock_client.query_vectors.call_args.kwargs
        assert kwargs["topK"] == 2
        assert kwargs["returnMetadata"] is True

    def test_query_error_is_mapped(self, store, mock_client):
        mock_client.query_vectors.side_effect = _client_error("NotFoundException", "Index not found", "QueryVectors")

        with pytest.raises(VectorStoreError) as exc_info:
            store.query([0.1], top_k=5)

        assert exc_info.value.operation == "query"
        assert exc_info.value.code == "NotFoundException"
