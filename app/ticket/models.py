# app/ticket/models.py
from sqlalchemy import JSON, Column, Integer, String
from app.core.database import Base

DEFAULT_STATUS = "Open"

class Ticket(Base):
    __tablename__ = "tickets"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # Plain id, no foreign key: tickets survive the deletion of their user
    user_id = Column(Integer, index=True, nullable=False)
    description = Column(String, nullable=False)
    # Any JSON value is kept as sent, numbers included
    status = Column(JSON, default=DEFAULT_STATUS, nullable=False)
    created_at = Column(String, nullable=False)
