# app/ticket/models.py
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String
from app.core.database import Base, new_id


class TicketPriority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class TicketStatus(str, enum.Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String, primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    priority = Column(String, nullable=False, default=TicketPriority.MEDIUM.value)
    # never written by the create path
    status = Column(String, nullable=False, server_default=TicketStatus.OPEN.value, index=True)
    org_id = Column(String, ForeignKey("organizations.id"), nullable=False, index=True)
    requester_id = Column(String, ForeignKey("users.id"), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
