"""
Minutes prompts.

Japanese templates for the running summary and for each extractable
minutes section.

Dependencies: sales_coach.models.minutes
System role: Prompt templates for minutes drafting
"""

from sales_coach.models.minutes import MinutesSection

SUMMARY_CHUNK_PROMPT = "以下の会話を簡潔に要約してください:\n\n{messages}"
SUMMARY_MERGE_PROMPT = "以下の要約をまとめて、全体の議事録を作成してください:\n\n{summaries}"

_SECTION_INSTRUCTIONS = {
    MinutesSection.AGREEMENTS: (
        "この会話から合意された条件や事項を抽出し、"
        "「項目: 詳細な説明」の形式で3〜5項目リストアップしてください。"
    ),
    MinutesSection.CONCERNS: (
        "この会話から未解決の懸念事項や問題点を抽出し、"
        "「懸念事項: 詳細と未解決の理由」の形式で2〜3項目リストアップしてください。"
    ),
    MinutesSection.ACTION_ITEMS: (
        "この会話からアクションアイテムを抽出し、"
        "「タスク | 担当者 | 期限」の形式で3〜5項目リストアップしてください。"
        "期限は具体的な日付で示してください。"
    ),
}


def build_summary_chunk_prompt(messages: list[str]) -> str:
    return SUMMARY_CHUNK_PROMPT.format(messages="\n".join(messages))


def build_summary_merge_prompt(summaries: list[str]) -> str:
    return SUMMARY_MERGE_PROMPT.format(summaries="\n\n".join(summaries))


def build_section_prompt(section: MinutesSection, transcript: str) -> str:
    """Render the extraction prompt for one minutes section."""
    return f"以下は商談の会話です。{_SECTION_INSTRUCTIONS[section]}\n\n{transcript}"
