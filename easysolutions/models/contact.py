from pydantic import BaseModel
from typing import Optional


class ContactSubmission(BaseModel):
    # Presence is checked by the handler so a missing field gets the same
    # message as an empty one
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    success: bool
    message: str
    messageId: str
