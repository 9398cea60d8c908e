"""
SQLAlchemy models for the conversation transcript.
"""

from datetime import datetime
from sqlalchemy import (
    Column,
    Index,
    Integer,
    String,
    Text,
    DateTime,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TranscriptMessage(Base):
    """Transcript - every inbound and outbound unit of a conversation."""

    __tablename__ = "messages"
    __table_args__ = (
        Index("idx_messages_user_created_order", "user_id", "created_at", "order"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)  # conversation owner
    sender_id = Column(String(64), nullable=False)  # "0" for the bot
    type = Column(String(16), nullable=False)  # "text" or "photo"
    payload = Column(Text, nullable=False)
    order = Column(Integer, nullable=True)  # only set by batch writes
    created_at = Column(DateTime, default=lambda: datetime.utcnow(), nullable=False, index=True)

    def __repr__(self):
        return f"<TranscriptMessage(user_id={self.user_id}, sender_id={self.sender_id}, type='{self.type}', order={self.order})>"
