"""
Test suite for the question answering endpoint.

Tests POST /ask with FastAPI TestClient over the real pipeline built on
fake providers, plus error payloads with a mocked agent.

System role: Verification of Q&A HTTP API
"""

import asyncio
from unittest.mock import MagicMock

import httpx
import pytest
from langchain_core.language_models import FakeListChatModel

from sales_coach.core.agent import SalesCoachAgent
from sales_coach.core.exceptions import ConfigurationError, GenerationError
from sales_coach.main import create_app
from sales_coach.models.chat import AgentAnswer
from sales_coach.models.retrieval import RetrievalStatus


class TestAskSuccessful:
    """Test suite for successful /ask requests."""

    def test_japanese_question_is_answered(self, make_client, make_agent):
        """
        Test a question is answered with the model text verbatim.

        Arrange: Agent over fakes with a fixed model response
        Act: POST /ask with a Japanese question
        Assert: 200 with the answer and no-match grounding (empty store)
        """
        # Arrange
        client = make_client(make_agent(responses=["御社の課題に合わせてご提案します。"]))

        # Act
        response = client.post("/ask", json={"question": "この製品の強みは何ですか？"})

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "answer": "御社の課題に合わせてご提案します。",
            "grounding": "no_matches",
        }

    def test_answer_grounded_after_adding_knowledge(self, make_client, make_agent):
        client = make_client(make_agent(responses=["月額1万円です"]))
        client.post("/knowledge/add", json={"text": "料金は月額1万円", "source": "pricing"})

        response = client.post("/ask", json={"question": "料金は？"})

        assert response.json()["grounding"] == "grounded"

    def test_degraded_grounding_is_reported(self, make_client, mock_agent):
        mock_agent.ask_with_context.return_value = AgentAnswer(text="answer", grounding=RetrievalStatus.DEGRADED)
        client = make_client(mock_agent)

        response = client.post("/ask", json={"question": "q"})

        assert response.status_code == 200
        assert response.json()["grounding"] == "degraded"


    @pytest.mark.asyncio
    async def test_concurrent_first_requests_share_one_setup(self, settings, fake_embeddings, fake_store):
        # Arrange
        embeddings_factory = MagicMock(return_value=fake_embeddings)
        agent = SalesCoachAgent(
            settings,
            embeddings_factory=embeddings_factory,
            chat_model_factory=lambda _settings: FakeListChatModel(responses=["one", "two"]),
            vector_store_factory=lambda _store_settings, _embeddings: fake_store,
        )
        transport = httpx.ASGITransport(app=create_app(settings, agent=agent))

        # Act
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            responses = await asyncio.gather(
                client.post("/ask", json={"question": "first"}),
                client.post("/ask", json={"question": "second"}),
            )

        # Assert
        assert [r.status_code for r in responses] == [200, 200]
        assert sorted(r.json()["answer"] for r in responses) == ["one", "two"]
        embeddings_factory.assert_called_once()

class TestAskValidation:
    """Test suite for /ask request validation."""

    @pytest.mark.parametrize("payload", [{}, {"question": ""}, {"question": None}])
    def test_missing_question_is_400(self, make_client, mock_agent, payload):
        client = make_client(mock_agent)

        response = client.post("/ask", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing 'question' in request body"}
        mock_agent.ask_with_context.assert_not_awaited()

    def test_missing_body_is_400(self, make_client, mock_agent):
        client = make_client(mock_agent)

        response = client.post("/ask")

        assert response.status_code == 400
        assert response.json()["error"] == "Missing 'question' in request body"

    def test_malformed_json_is_400(self, make_client, mock_agent):
        client = make_client(mock_agent)

        response = client.post("/ask", content=b"{not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}


class TestAskErrors:
    """Test suite for /ask internal errors."""

    def test_generation_error_is_500_without_stack(self, make_client, mock_agent):
        # Arrange
        mock_agent.ask_with_context.side_effect = GenerationError("model overloaded", code="ResourceExhausted")
        client = make_client(mock_agent)

        # Act
        response = client.post("/ask", json={"question": "q"})

        # Assert
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal Server Error"
        assert "model overloaded" in body["message"]
        assert "stack" not in body

    def test_stack_included_in_debug(self, make_client, mock_agent, settings):
        settings.debug = True
        mock_agent.ask_with_context.side_effect = RuntimeError("boom")
        client = make_client(mock_agent, app_settings=settings)

        response = client.post("/ask", json={"question": "q"})

        assert response.status_code == 500
        assert "RuntimeError: boom" in response.json()["stack"]

    def test_missing_credentials_is_500(self, make_client, mock_agent):
        mock_agent.ask_with_context.side_effect = ConfigurationError("LLM API key is not configured", setting="LLM_API_KEY")
        client = make_client(mock_agent)

        response = client.post("/ask", json={"question": "q"})

        assert response.status_code == 500
        assert "LLM API key is not configured" in response.json()["message"]
