from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.user import generate_id
from app.schemas.common import TeamRole


class Team(Base):
    __tablename__ = "teams"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(100), nullable=False)
    plan = Column(String(50), default="free", nullable=False)
    stripe_id = Column(String(255), unique=True, nullable=True)
    subscription_id = Column(String(255), unique=True, nullable=True)
    starts_at = Column(DateTime, nullable=True)
    ends_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    users = relationship("UserTeam", back_populates="team", cascade="all, delete-orphan")
    documents = relationship("Document", back_populates="team")
    domains = relationship("Domain", back_populates="team")


class UserTeam(Base):
    __tablename__ = "user_teams"

    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    team_id = Column(String(32), ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True, index=True)
    role = Column(String(20), default=TeamRole.member.value, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="teams")
    team = relationship("Team", back_populates="users")
