"""
Shared test fixtures and configuration for entire test suite.

Provides: settings with fake credentials, fake embeddings and chat models,
an in-memory vector store, and an agent factory wiring them together.
Nothing here touches the network.

Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from pathlib import Path
import tempfile

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models import FakeListChatModel

from sales_coach.boundary.vdb.vector_schemas import VectorMatch, VectorRecord
from sales_coach.configs import Settings
from sales_coach.configs.knowledge import KnowledgeSettings
from sales_coach.configs.llm import EmbeddingSettings, LLMSettings
from sales_coach.configs.vector_store import VectorStoreSettings
from sales_coach.core.agent import SalesCoachAgent

EMBEDDING_SIZE = 8


class FakeVectorStore:
    """In-memory KnowledgeVectorStore recording every call."""

    def __init__(
        self,
        upsert_error: Exception | None = None,
        query_error: Exception | None = None,
        fail_on_batch: int | None = None,
    ) -> None:
        self.records: dict[str, VectorRecord] = {}
        self.upsert_calls: list[list[VectorRecord]] = []
        self.query_calls: list[tuple[list[float], int]] = []
        self.upsert_error = upsert_error
        self.query_error = query_error
        self.fail_on_batch = fail_on_batch

    def upsert(self, records: list[VectorRecord]) -> None:
        batch_number = len(self.upsert_calls)
        self.upsert_calls.append(list(records))
        if self.upsert_error is not None and (
            self.fail_on_batch is None or self.fail_on_batch == batch_number
        ):
            raise self.upsert_error
        for record in records:
            self.records[record.id] = record

    def query(self, embedding: list[float], top_k: int) -> list[VectorMatch]:
        self.query_calls.append((embedding, top_k))
        if self.query_error is not None:
            raise self.query_error
        return [
            VectorMatch(id=record.id, score=0.0, metadata=record.metadata())
            for record in list(self.records.values())[:top_k]
        ]


@pytest.fixture
def settings() -> Settings:
    """Settings with fake credentials and no seed file."""
    return Settings(
        debug=False,
        llm=LLMSettings(api_key="test-llm-key"),
        embedding=EmbeddingSettings(api_key="test-embedding-key", dimension=EMBEDDING_SIZE),
        vector_store=VectorStoreSettings(store_type="memory"),
        knowledge=KnowledgeSettings(seed_file=None),
    )


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=EMBEDDING_SIZE)


@pytest.fixture
def fake_store() -> FakeVectorStore:
    return FakeVectorStore()


@pytest.fixture
def make_agent(settings, fake_embeddings, fake_store):
    """
    Build a SalesCoachAgent over fakes.

    Returns:
        Callable: (responses, store, settings) -> SalesCoachAgent
    """

    def _make(
        responses: list[str] | None = None,
        store: FakeVectorStore | None = None,
        agent_settings: Settings | None = None,
    ) -> SalesCoachAgent:
        chat_model = FakeListChatModel(responses=responses or ["テスト回答"])
        target_store = store if store is not None else fake_store
        return SalesCoachAgent(
            agent_settings or settings,
            embeddings_factory=lambda _settings: fake_embeddings,
            chat_model_factory=lambda _settings: chat_model,
            vector_store_factory=lambda _store_settings, _embeddings: target_store,
        )

    return _make


@pytest.fixture
def upload_file():
    """
    Create a text file inside a salescoach_ temp directory.

    Yields:
        Callable: (content: bytes, name: str) -> Path
    """
    created: list[Path] = []

    def _create(content: bytes, name: str = "notes.txt") -> Path:
        temp_dir = Path(tempfile.mkdtemp(prefix="salescoach_"))
        path = temp_dir / name
        path.write_bytes(content)
        created.append(path)
        return path

    yield _create

    for path in created:
        if path.parent.exists():
            for child in path.parent.iterdir():
                child.unlink()
            path.parent.rmdir()


@pytest.fixture
def store_factory():
    """Provide the FakeVectorStore class for tests needing failure modes."""
    return FakeVectorStore
