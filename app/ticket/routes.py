# app/ticket/routes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.errors import NotFoundError
from app.core.http import as_text, json_body, parse_id
from app.ticket.schemas import TicketCreate, TicketMessage, TicketOut, TicketStatusUpdate
from app.ticket import services as ticket_service
router = APIRouter(prefix="/tickets", tags=["Tickets"])

TICKET_NOT_FOUND = "Ticket not found."


@router.post("", response_model=TicketOut, status_code=201)
def create(ticket: TicketCreate = Depends(json_body(TicketCreate)), db: Session = Depends(get_db)):
    return ticket_service.create_ticket(db, ticket)


@router.get("", response_model=list[TicketOut])
def list_all(
    status: str | None = Query(default=None, description="Filter by exact status"),
    user_id: str | None = Query(default=None, alias="userId", description="Filter by owner id"),
    db: Session = Depends(get_db),
):
    items = ticket_service.get_all_tickets(db)
    if status:
        items = [t for t in items if as_text(t.status) == status]
    if user_id:
        owner = parse_id(user_id)
        items = [t for t in items if t.user_id == owner]
    return items


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, db: Session = Depends(get_db)):
    ticket = ticket_service.get_ticket(db, parse_id(ticket_id))
    if not ticket:
        raise NotFoundError(TICKET_NOT_FOUND)
    return ticket


@router.put("/{ticket_id}/status", response_model=TicketMessage)
def update_status(
    ticket_id: str,
    ticket: TicketStatusUpdate = Depends(json_body(TicketStatusUpdate)),
    db: Session = Depends(get_db),
):
    updated = ticket_service.update_status(db, parse_id(ticket_id), ticket)
    if not updated:
        raise NotFoundError(TICKET_NOT_FOUND)
    return {"message": "Ticket status updated successfully.", "ticket": updated}


@router.delete("/{ticket_id}", response_model=TicketMessage)
def delete(ticket_id: str, db: Session = Depends(get_db)):
    deleted = ticket_service.delete_ticket(db, parse_id(ticket_id))
    if not deleted:
        raise NotFoundError(TICKET_NOT_FOUND)
    return {"message": "Ticket deleted successfully.", "ticket": deleted}
