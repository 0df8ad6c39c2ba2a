"""
Coaching prompt.

Fixed Japanese template asking for three categories of advice:
follow-up questions, next steps and other tips.

Dependencies: langchain_core.prompts
System role: Prompt template for coaching suggestions
"""

from langchain_core.prompts import PromptTemplate

COACHING_TEMPLATE = """以下は商談の会話です。この会話を分析し、以下の3つのカテゴリに分けて簡潔なアドバイスを提供してください:

1. 質問例:次に尋ねるべき具体的な質問を2-3個
2. 次のステップ:商談を進めるための次のアクションを1-2個
3. その他提案:商談を成功させるためのヒントを1-2個

回答は各カテゴリごとに箇条書きで、説明は必要ありません。具体的な内容だけを書いてください。

会話:
{conversation}

回答形式：
質問例：
- 
- 

次のステップ：
- 

その他提案：
- 
"""

COACHING_PROMPT = PromptTemplate.from_template(COACHING_TEMPLATE)


def build_coaching_prompt(conversation_text: str) -> str:
    """Render the coaching prompt for a transcript."""
    return COACHING_PROMPT.format(conversation=conversation_text)
