# app/ticket/services.py
import logging

from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from app.core.clock import clock
from app.core.errors import NotFoundError, ValidationError
from app.core.http import as_id, as_text, is_blank
from app.ticket.models import DEFAULT_STATUS, Ticket
from app.ticket.schemas import TicketCreate, TicketStatusUpdate
from app.user import services as user_service

logger = logging.getLogger(__name__)

FIELDS_REQUIRED = "The fields userId and description are required."
STATUS_REQUIRED = "Status is required."
USER_NOT_FOUND = "User not found."


def get_all_tickets(db: Session) -> list[Ticket]:
    return db.query(Ticket).order_by(Ticket.id).all()

def get_ticket(db: Session, ticket_id: int | None) -> Ticket | None:
    if ticket_id is None:
        return None
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()

def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    """Open a ticket for an existing user.

    Presence of both fields is checked before ``userId`` is looked at, so a
    non-empty value of the wrong type gets past the 400 and ends as a 404.
    """
    if is_blank(payload.user_id) or is_blank(payload.description):
        raise ValidationError(FIELDS_REQUIRED)

    user_id = as_id(payload.user_id)
    if not user_service.get_user(db, user_id):
        logger.warning("Rejected ticket for unknown user %r", payload.user_id)
        raise NotFoundError(USER_NOT_FOUND)

    db_ticket = Ticket(
        user_id=user_id,
        description=as_text(payload.description),
        status=DEFAULT_STATUS,
        created_at=clock.timestamp(),
    )
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    logger.info("Created ticket %s for user %s", db_ticket.id, user_id)
    return db_ticket

def update_status(db: Session, ticket_id: int | None, payload: TicketStatusUpdate) -> Ticket | None:
    db_ticket = get_ticket(db, ticket_id)
    if not db_ticket:
        return None
    # No transition rules: any non-empty value replaces any other
    if is_blank(payload.status):
        raise ValidationError(STATUS_REQUIRED)
    db_ticket.status = payload.status
    # JSON compares with ==, so 1 -> True or 1 -> 1.0 would look unchanged
    flag_modified(db_ticket, "status")
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s status set to %r", db_ticket.id, db_ticket.status)
    return db_ticket

def delete_ticket(db: Session, ticket_id: int | None) -> Ticket | None:
    db_ticket = get_ticket(db, ticket_id)
    if not db_ticket:
        return None
    db.delete(db_ticket)
    db.commit()
    logger.info("Deleted ticket %s", db_ticket.id)
    return db_ticket
