"""Coaching suggestions for in-progress sales conversations."""

from sales_coach.core.coaching.categorizer import categorize_suggestions
from sales_coach.core.coaching.parser import split_numbered_suggestions
from sales_coach.core.coaching.service import CoachingService

__all__ = ["CoachingService", "categorize_suggestions", "split_numbered_suggestions"]
