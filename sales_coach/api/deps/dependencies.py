"""
Dependency injection functions.

The agent handle is created in the application lifespan and kept on
app.state; services are thin per-request wrappers around it.

Dependencies: fastapi, sales_coach.core
System role: DI for endpoint handlers
"""

from fastapi import Depends, Request

from sales_coach.core.agent import SalesCoachAgent
from sales_coach.core.coaching import CoachingService
from sales_coach.core.minutes import MinutesService


def get_agent(request: Request) -> SalesCoachAgent:
    """Get the shared agent handle."""
    return request.app.state.agent


def get_coaching_service(agent: SalesCoachAgent = Depends(get_agent)) -> CoachingService:
    return CoachingService(agent)


def get_minutes_service(agent: SalesCoachAgent = Depends(get_agent)) -> MinutesService:
    return MinutesService(agent)
