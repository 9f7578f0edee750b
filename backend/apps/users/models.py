"""User Data Models."""
from datetime import datetime

from apps.core.schemas import CamelModel


class UserResponse(CamelModel):
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    created_at: datetime
    updated_at: datetime
