"""
Pydantic schemas for persons.

A person is an identifier assigned by storage plus a name.  Clients
only ever send the name; any ``id`` in a request body is ignored.
"""

from pydantic import BaseModel, Field, field_validator


class PersonWrite(BaseModel):
    """Schema for the body of create and update requests."""

    name: str = Field(..., description="Name of the person; must not be blank")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty")
        return v


class PersonRead(BaseModel):
    """Schema for reading a person."""

    id: int
    name: str
