"""
Suggestion categorisation.

Heuristic keyword classifier that buckets flat suggestion strings into
questions, next steps and tips. It is intentionally simple: an item is
matched on substrings, first bucket wins.

When no item matched a question keyword the whole list is redistributed
by position instead: with third = ceil(n / 3) the buckets become
items[0:third], items[third:2*third] and items[2*third:].

Dependencies: None
System role: Client-side presentation of coaching suggestions
"""

import math

from sales_coach.models.coaching import CoachingSuggestionSet

QUESTION_KEYWORDS = ("質問", "聞く", "ヒアリング")
NEXT_STEP_KEYWORDS = ("次", "ステップ", "進める")


def _matches(item: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in item for keyword in keywords)


def categorize_suggestions(items: list[str]) -> CoachingSuggestionSet:
    """
    Bucket suggestions into questions, next steps and tips.

    Every input item appears in exactly one bucket, order preserved.

    Args:
        items: Flat suggestion strings

    Returns:
        CoachingSuggestionSet: Categorised suggestions
    """
    questions: list[str] = []
    next_steps: list[str] = []
    tips: list[str] = []

    for item in items:
        if _matches(item, QUESTION_KEYWORDS):
            questions.append(item)
        elif _matches(item, NEXT_STEP_KEYWORDS):
            next_steps.append(item)
        else:
            tips.append(item)

    if not questions and items:
        third = math.ceil(len(items) / 3)
        return CoachingSuggestionSet(
            questions=list(items[:third]),
            next_steps=list(items[third:2 * third]),
            tips=list(items[2 * third:]),
        )

    return CoachingSuggestionSet(questions=questions, next_steps=next_steps, tips=tips)
