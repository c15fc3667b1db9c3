from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.user import generate_id


class Domain(Base):
    __tablename__ = "domains"

    id = Column(String(32), primary_key=True, default=generate_id)
    slug = Column(String(255), unique=True, nullable=False)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    team_id = Column(String(32), ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    team = relationship("Team", back_populates="domains")
