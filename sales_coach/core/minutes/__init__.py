"""Meeting-minutes drafting from conversation transcripts."""

from sales_coach.core.minutes.service import MinutesService, parse_list_items

__all__ = ["MinutesService", "parse_list_items"]
