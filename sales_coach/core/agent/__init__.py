"""Sales-coach agent: lazily built RAG pipeline behind a single handle."""

from sales_coach.core.agent.sales_coach_agent import RAGPipeline, SalesCoachAgent

__all__ = ["RAGPipeline", "SalesCoachAgent"]
