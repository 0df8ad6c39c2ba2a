"""
Sales-coach agent facade.

Owns the RAG pipeline (retriever, answer generator, knowledge ingestor)
and builds it lazily, exactly once per agent handle. The build runs as a
single asyncio task shared by every caller: concurrent first callers
await the same in-flight build, and a failed build is remembered and
re-raised to everyone who asks afterwards.

Dependencies: langchain_google_genai, sales_coach.core, sales_coach.boundary.vdb
System role: Question answering entry point used by every HTTP operation
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from sales_coach.boundary.vdb.vector_schemas import KnowledgeVectorStore
from sales_coach.boundary.vdb.vector_store_factory import create_vector_store
from sales_coach.configs import Settings, get_settings
from sales_coach.configs.vector_store import VectorStoreSettings
from sales_coach.core.agent.answer_generator import AnswerGenerator
from sales_coach.core.exceptions import ConfigurationError
from sales_coach.core.knowledge.ingestion import KnowledgeIngestor
from sales_coach.core.knowledge.uploads import cleanup_temp_file
from sales_coach.core.retriever import Retriever
from sales_coach.models.chat import AgentAnswer
from sales_coach.models.knowledge import IngestionResult
from sales_coach.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

EmbeddingsFactory = Callable[[Settings], Embeddings]
ChatModelFactory = Callable[[Settings], BaseChatModel]
VectorStoreFactory = Callable[[VectorStoreSettings, Embeddings], KnowledgeVectorStore]


def default_embeddings_factory(settings: Settings) -> Embeddings:
    from sales_coach.boundary.vdb.embeddings_wrapper import FixedDimensionEmbeddings

    return FixedDimensionEmbeddings(
        model=settings.embedding.model,
        output_dimensionality=settings.embedding.dimension,
        google_api_key=settings.embedding_api_key,
    )


def default_chat_model_factory(settings: Settings) -> BaseChatModel:
    from langchain_google_genai import ChatGoogleGenerativeAI

    return ChatGoogleGenerativeAI(
        model=settings.llm.model,
        temperature=settings.llm.temperature,
        google_api_key=settings.llm.api_key,
    )


@dataclass(frozen=True)
class RAGPipeline:
    """Fully constructed pipeline components."""

    retriever: Retriever
    generator: AnswerGenerator
    ingestor: KnowledgeIngestor


class SalesCoachAgent:
    """
    Lazily initialised RAG question-answering agent.

    Nothing touches the network until the first call; the pipeline is then
    built once and reused for the lifetime of the handle.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        embeddings_factory: EmbeddingsFactory | None = None,
        chat_model_factory: ChatModelFactory | None = None,
        vector_store_factory: VectorStoreFactory | None = None,
    ) -> None:
        """
        Initialize agent handle.

        Args:
            settings: Application settings (defaults to get_settings())
            embeddings_factory: Builds the embedding provider
            chat_model_factory: Builds the chat model
            vector_store_factory: Builds the vector store from its settings
        """
        self._settings = settings or get_settings()
        self._embeddings_factory = embeddings_factory or default_embeddings_factory
        self._chat_model_factory = chat_model_factory or default_chat_model_factory
        self._vector_store_factory = vector_store_factory or create_vector_store
        self._pipeline_task: asyncio.Task[RAGPipeline] | None = None

    @property
    def is_initialized(self) -> bool:
        """True once a build has completed successfully."""
        task = self._pipeline_task
        return task is not None and task.done() and not task.cancelled() and task.exception() is None

    async def _get_pipeline(self) -> RAGPipeline:
        if self._pipeline_task is None:
            logger.info(f"{__name__}:_get_pipeline - Starting pipeline build")
            self._pipeline_task = asyncio.ensure_future(self._build_pipeline())
        # shield: a cancelled request must not cancel the shared build
        return await asyncio.shield(self._pipeline_task)

    def _check_configuration(self) -> Path | None:
        settings = self._settings
        if not settings.llm.api_key:
            raise ConfigurationError(
                "LLM API key is not configured (set LLM_API_KEY or GOOGLE_API_KEY)",
                setting="LLM_API_KEY",
            )
        if not settings.embedding_api_key:
            raise ConfigurationError(
                "Embedding API key is not configured (set EMBEDDING_API_KEY)",
                setting="EMBEDDING_API_KEY",
            )

        if not settings.knowledge.seed_file:
            return None
        seed_path = Path(settings.knowledge.seed_file)
        if not seed_path.is_file():
            raise ConfigurationError(
                f"Knowledge seed file not found: {seed_path}",
                setting="KNOWLEDGE_SEED_FILE",
            )
        return seed_path

    async def _build_pipeline(self) -> RAGPipeline:
        try:
            seed_path = self._check_configuration()

            logger.info(f"{__name__}:_build_pipeline - Step 1: Creating embeddings provider")
            embeddings = self._embeddings_factory(self._settings)

            logger.info(
                f"{__name__}:_build_pipeline - Step 2: Creating vector store "
                f"(type={self._settings.vector_store.store_type})"
            )
            vector_store = self._vector_store_factory(self._settings.vector_store, embeddings)

            logger.info(f"{__name__}:_build_pipeline - Step 3: Creating chat model (model={self._settings.llm.model})")
            chat_model = self._chat_model_factory(self._settings)

            pipeline = RAGPipeline(
                retriever=Retriever(embeddings, vector_store, top_k=self._settings.vector_store.top_k),
                generator=AnswerGenerator(chat_model),
                ingestor=KnowledgeIngestor(
                    embeddings,
                    vector_store,
                    batch_size=self._settings.knowledge.batch_size,
                    dimension=getattr(embeddings, "dimension", None),
                ),
            )

            if seed_path is not None:
                logger.info(f"{__name__}:_build_pipeline - Step 4: Ingesting seed file {seed_path.name}")
                seeded = await pipeline.ingestor.ingest_seed_file(seed_path)
                logger.info(f"{__name__}:_build_pipeline - Seeded {seeded.accepted_count} chunks")
        except Exception as e:
            logger.error(f"{__name__}:_build_pipeline - FAILED: {type(e).__name__}: {e}")
            raise

        logger.info(f"{__name__}:_build_pipeline - Pipeline ready")
        return pipeline

    async def ask_with_context(self, question: str) -> AgentAnswer:
        """
        Answer a question and report how it was grounded.

        Args:
            question: Question text

        Returns:
            AgentAnswer: Answer text, grounding status and context sources

        Raises:
            ConfigurationError: Pipeline could not be built
            GenerationError: Model call failed
        """
        logger.info(
            f"{__name__}:ask_with_context - START",
            extra={"question": safe_log_value(question, max_length=100)},
        )
        pipeline = await self._get_pipeline()

        retrieval = await pipeline.retriever.fetch_context(question)
        text = await pipeline.generator.generate(question, retrieval.documents)
        sources = list(dict.fromkeys(document.source_label for document in retrieval.documents))

        logger.info(f"{__name__}:ask_with_context - END grounding={retrieval.status.value}")
        return AgentAnswer(text=text, grounding=retrieval.status, sources=sources)

    async def ask(self, question: str) -> str:
        """Answer a question, returning the model text verbatim."""
        answer = await self.ask_with_context(question)
        return answer.text

    async def ingest_text(self, raw_text: str, source_label: str | None = None) -> IngestionResult:
        """Add knowledge text through the pipeline's ingestor."""
        pipeline = await self._get_pipeline()
        return await pipeline.ingestor.ingest_text(raw_text, source_label=source_label)

    async def ingest_file(self, path: str | Path, source_label: str | None = None) -> IngestionResult:
        """Add an uploaded file's text; the file is deleted afterwards."""
        try:
            pipeline = await self._get_pipeline()
        except Exception:
            cleanup_temp_file(path)
            raise
        return await pipeline.ingestor.ingest_file(path, source_label=source_label)
