"""
Test suite for minutes endpoints.

System role: Verification of POST /minutes/summary and /minutes/extract
"""


def _conversation() -> list[dict]:
    return [
        {"speaker": "user", "text": "来月から導入したい"},
        {"speaker": "ai", "text": "承知しました"},
    ]


class TestMinutesSummary:
    """Test suite for POST /minutes/summary."""

    def test_summary_is_returned(self, make_client, mock_agent):
        mock_agent.ask.return_value = "来月導入の意向"
        client = make_client(mock_agent)

        response = client.post("/minutes/summary", json={"conversation": _conversation()})

        assert response.status_code == 200
        assert response.json() == {"summary": "来月導入の意向"}

    def test_no_user_messages_is_400(self, make_client, mock_agent):
        client = make_client(mock_agent)

        response = client.post(
            "/minutes/summary",
            json={"conversation": [{"speaker": "ai", "text": "こんにちは"}]},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "要約するメッセージがありません。"}


class TestMinutesExtract:
    """Test suite for POST /minutes/extract."""

    def test_section_items_are_returned(self, make_client, mock_agent):
        # Arrange
        mock_agent.ask.return_value = "- 導入時期: 来月\n- 契約形態: 年間"
        client = make_client(mock_agent)

        # Act
        response = client.post(
            "/minutes/extract",
            json={"conversation": _conversation(), "section": "agreements"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "section": "agreements",
            "items": ["導入時期: 来月", "契約形態: 年間"],
        }

    def test_missing_section_is_400(self, make_client, mock_agent):
        client = make_client(mock_agent)

        response = client.post("/minutes/extract", json={"conversation": _conversation()})

        assert response.status_code == 400
        assert response.json() == {"error": "有効なセクションが必要です"}
