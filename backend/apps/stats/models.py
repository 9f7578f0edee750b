"""Stats Data Models."""
from apps.core.schemas import CamelModel


class AppStatsResponse(CamelModel):
    total_users: int = 0
    total_analyses: int = 0
