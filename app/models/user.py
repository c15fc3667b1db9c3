import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from app.db.session import Base


def generate_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, nullable=True)
    # Billing fields copied onto a user's default team
    plan = Column(String(50), default="free", nullable=False)
    stripe_id = Column(String(255), unique=True, nullable=True)
    subscription_id = Column(String(255), unique=True, nullable=True)
    starts_at = Column(DateTime, nullable=True)
    ends_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    teams = relationship("UserTeam", back_populates="user", cascade="all, delete-orphan")
