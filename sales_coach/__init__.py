"""
Sales-Coach backend package.

RAG question answering, coaching suggestions, meeting-minutes drafting,
and knowledge-base ingestion behind a FastAPI HTTP boundary.
"""

__version__ = "0.1.0"
