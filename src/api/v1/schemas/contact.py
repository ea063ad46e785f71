"""Pydantic schemas for the contact form."""

from pydantic import BaseModel


class ContactResponse(BaseModel):
    success: bool = True
    message: str = "Message received"
