from sqlalchemy import Column, DateTime, String

from apps.core.database import Base
from apps.core.timeutil import utcnow


class User(Base):
    """Identity forwarded by the upstream auth layer, keyed by its subject id."""
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    email = Column(String, unique=True, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
