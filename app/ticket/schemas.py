# app/ticket/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field
from app.ticket.models import TicketPriority, TicketStatus


class TicketBase(BaseModel):
    title: str = Field(..., min_length=3)
    description: str = Field(..., min_length=3)


class TicketCreate(TicketBase):
    priority: TicketPriority = TicketPriority.MEDIUM


class TicketOut(BaseModel):
    id: str
    title: str
    description: str
    priority: TicketPriority
    status: TicketStatus
    org_id: str = Field(serialization_alias="orgId")
    requester_id: str = Field(serialization_alias="requesterId")
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}


class TicketSummary(BaseModel):
    open: int = 0
    in_progress: int = 0
    resolved: int = 0
