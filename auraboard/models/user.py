import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import relationship
from auraboard.database import Base

# Plain DATETIME on MySQL drops the fractional part.
Timestamp = DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"
    id = Column(String(32), primary_key=True, default=_new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=False, default="")
    created_at = Column(Timestamp, nullable=False, default=_utcnow)

    tasks = relationship("Task", back_populates="owner", cascade="all, delete-orphan")
