# app/ticket/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.ticket.dependencies import RequesterResolver, get_org_id, get_requester_resolver
from app.ticket.schemas import TicketCreate, TicketOut, TicketSummary
from app.ticket import services as ticket_service

router = APIRouter(prefix="/api/tickets", tags=["Tickets"])


@router.get("", response_model=list[TicketOut])
def list_all(org_id: str = Depends(get_org_id), db: Session = Depends(get_db)):
    return ticket_service.get_all_tickets(db, org_id)


@router.post("", response_model=TicketOut)
def create(
    ticket: TicketCreate,
    org_id: str = Depends(get_org_id),
    resolve_requester: RequesterResolver = Depends(get_requester_resolver),
    db: Session = Depends(get_db),
):
    # resolved after body validation so bad input is reported first
    requester = resolve_requester(db)
    return ticket_service.create_ticket(db, ticket, org_id, requester)


@router.get("/summary", response_model=TicketSummary)
def summary(org_id: str = Depends(get_org_id), db: Session = Depends(get_db)):
    return ticket_service.summarize_tickets(ticket_service.get_all_tickets(db, org_id))
