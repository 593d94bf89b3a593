# app/ticket/schemas.py
from typing import Any

from pydantic import BaseModel, Field

class TicketCreate(BaseModel):
    user_id: Any = Field(default=None, alias="userId")
    description: Any = None

class TicketStatusUpdate(BaseModel):
    status: Any = None

class TicketOut(BaseModel):
    id: int
    user_id: int = Field(serialization_alias="userId")
    description: str
    status: Any
    created_at: str = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}

class TicketMessage(BaseModel):
    message: str
    ticket: TicketOut
