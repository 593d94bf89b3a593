# app/user/schemas.py
from typing import Any

from pydantic import BaseModel

# Inputs are weakly typed on purpose: presence is checked by the services,
# unknown keys (including a client-sent id) are dropped.

class UserCreate(BaseModel):
    name: Any = None
    email: Any = None

class UserUpdate(BaseModel):
    name: Any = None
    email: Any = None

class UserOut(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}

class UserMessage(BaseModel):
    message: str
    user: UserOut
