from sqlalchemy import Boolean, Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from auraboard.database import Base
from auraboard.models.user import Timestamp, _new_id, _utcnow


class Task(Base):
    __tablename__ = "tasks"
    id = Column(String(32), primary_key=True, default=_new_id)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    category = Column(String(191), nullable=True)
    created_at = Column(Timestamp, nullable=False, default=_utcnow, index=True)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)

    owner = relationship("User", back_populates="tasks")
