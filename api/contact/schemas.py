"""
Contact-form schemas.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class ContactRequest(BaseModel):
    # Required fields are checked by the service to return one fixed message.
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    subject: str | None = Field(default=None, max_length=300)
    message: str | None = Field(default=None, max_length=10_000)


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: str
    subject: str
    message: str
    phone: str | None = None
