"""Core domain logic: agent, retrieval, ingestion, coaching and minutes."""
