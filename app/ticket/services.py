# app/ticket/services.py
from sqlalchemy.orm import Session
from app.account.models import User
from app.core.logging import get_logger
from app.ticket.models import Ticket, TicketStatus
from app.ticket.schemas import TicketCreate, TicketSummary

logger = get_logger("ticket")


def get_all_tickets(db: Session, org_id: str) -> list[Ticket]:
    return (
        db.query(Ticket)
        .filter(Ticket.org_id == org_id)
        .order_by(Ticket.created_at.desc())
        .all()
    )


def create_ticket(db: Session, payload: TicketCreate, org_id: str, requester: User) -> Ticket:
    db_ticket = Ticket(
        title=payload.title,
        description=payload.description,
        priority=payload.priority.value,
        org_id=org_id,
        requester_id=requester.id,
    )
    db.add(db_ticket)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    # picks up the store default for status
    db.refresh(db_ticket)
    logger.info("Created ticket %s for org %s", db_ticket.id, org_id)
    return db_ticket


def summarize_tickets(tickets: list[Ticket]) -> TicketSummary:
    summary = TicketSummary()
    for t in tickets:
        if t.status == TicketStatus.OPEN.value:
            summary.open += 1
        elif t.status == TicketStatus.IN_PROGRESS.value:
            summary.in_progress += 1
        elif t.status == TicketStatus.RESOLVED.value:
            summary.resolved += 1
    return summary
