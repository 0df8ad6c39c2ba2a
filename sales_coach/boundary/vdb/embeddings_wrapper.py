"""
Gemini embeddings pinned to one vector length.

Knowledge chunks and queries must share a dimension. GoogleGenerativeAIEmbeddings
only honours output_dimensionality per call, so this subclass injects it
into every sync and async embed call.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency across stored chunks
"""

import logging
from typing import Any, List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """Embeddings whose calls default to a configured output_dimensionality."""

    _output_dimensionality: int = 1024

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1024,
        **kwargs: Any,
    ) -> None:
        """
        Args:
            model: Gemini embedding model ID
            output_dimensionality: Vector length used when the caller does not pass one
            **kwargs: Passed through to GoogleGenerativeAIEmbeddings (google_api_key, ...)
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - model={model}, dimension={output_dimensionality}"
        )

    @property
    def dimension(self) -> int:
        return self._output_dimensionality

    def embed_documents(self, texts: List[str], **kwargs: Any) -> List[List[float]]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_documents(texts, **kwargs)

    def embed_query(self, text: str, **kwargs: Any) -> List[float]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_query(text, **kwargs)

    async def aembed_documents(self, texts: List[str], **kwargs: Any) -> List[List[float]]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return await super().aembed_documents(texts, **kwargs)

    async def aembed_query(self, text: str, **kwargs: Any) -> List[float]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return await super().aembed_query(text, **kwargs)
