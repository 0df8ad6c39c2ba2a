"""
Test suite for FAISSKnowledgeStore.

Uses a real FAISS index over deterministic fake embeddings.

Dependencies: pytest, faiss-cpu, langchain_community
System role: Local vector store verification
"""

import pytest

from sales_coach.boundary.vdb.faiss_store import FAISSKnowledgeStore
from sales_coach.boundary.vdb.vector_schemas import VectorRecord
from sales_coach.core.exceptions import VectorStoreError


@pytest.fixture
def store(fake_embeddings) -> FAISSKnowledgeStore:
    return FAISSKnowledgeStore(embeddings=fake_embeddings, index_name="test-index")


@pytest.fixture
def make_records(fake_embeddings):
    """Build VectorRecords with real fake-embedding vectors."""

    def _make(texts: list[str], label: str = "faq") -> list[VectorRecord]:
        vectors = fake_embeddings.embed_documents(texts)
        return [
            VectorRecord(id=f"{label}-{i}", text=text, source=label, embedding=vector)
            for i, (text, vector) in enumerate(zip(texts, vectors))
        ]

    return _make


class TestFAISSKnowledgeStore:
    """Test suite for upsert and query."""

    def test_query_empty_store_returns_nothing(self, store, fake_embeddings):
        assert store.query(fake_embeddings.embed_query("q"), top_k=5) == []

    def test_exact_vector_is_nearest(self, store, make_records, fake_embeddings):
        # Arrange
        store.upsert(make_records(["price list", "onboarding guide", "support hours"]))

        # Act
        matches = store.query(fake_embeddings.embed_query("onboarding guide"), top_k=2)

        # Assert
        assert len(matches) == 2
        assert matches[0].id == "faq-1"
        assert matches[0].metadata["text"] == "onboarding guide"
        assert matches[0].metadata["source"] == "faq"

    def test_upsert_same_id_replaces_record(self, store, make_records, fake_embeddings):
        store.upsert(make_records(["old text"]))
        store.upsert(make_records(["new text"]))

        matches = store.query(fake_embeddings.embed_query("new text"), top_k=5)

        assert len(store) == 1
        assert [match.metadata["text"] for match in matches] == ["new text"]

    def test_dimension_mismatch_raises_store_error(self, store, make_records):
        store.upsert(make_records(["first"]))
        bad = VectorRecord(id="bad-0", text="bad", source="x", embedding=[0.1, 0.2])

        with pytest.raises(VectorStoreError) as exc_info:
            store.upsert([bad])

        assert exc_info.value.operation == "upsert"

    def test_new_store_starts_empty(self, fake_embeddings, make_records):
        store = FAISSKnowledgeStore(fake_embeddings, index_name="shared-name")
        store.upsert(make_records(["only in the first store"]))

        fresh = FAISSKnowledgeStore(fake_embeddings, index_name="shared-name")

        assert len(fresh) == 0
        assert fresh.query(fake_embeddings.embed_query("only"), top_k=3) == []
