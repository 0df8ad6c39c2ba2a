"""
Test suite for the coaching endpoint.

System role: Verification of POST /coaching
"""

import pytest


@pytest.fixture
def conversation_payload() -> dict:
    return {
        "conversation": [
            {"speaker": "user", "text": "予算は限られています", "timestamp": "2024-05-01T10:00:00Z"},
            {"speaker": "AI", "text": "段階的な導入も可能です"},
        ]
    }


class TestCoachingEndpoint:
    """Test suite for POST /coaching."""

    def test_suggestions_are_split(self, make_client, make_agent, conversation_payload):
        # Arrange
        client = make_client(make_agent(responses=["1. 予算の上限を質問する 2. 次回デモを設定 3. 導入事例を紹介"]))

        # Act
        response = client.post("/coaching", json=conversation_payload)

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "suggestions": ["予算の上限を質問する", "次回デモを設定", "導入事例を紹介"],
        }

    @pytest.mark.parametrize("payload", [{"conversation": []}, {}])
    def test_empty_conversation_is_400(self, make_client, mock_agent, payload):
        client = make_client(mock_agent)

        response = client.post("/coaching", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "有効な会話データが必要です"}
        mock_agent.ask.assert_not_awaited()

    def test_unknown_speaker_is_invalid_body(self, make_client, mock_agent):
        client = make_client(mock_agent)

        response = client.post("/coaching", json={"conversation": [{"speaker": "robot", "text": "hi"}]})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}
