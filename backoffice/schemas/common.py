"""Response envelopes shared by the CRUD routes."""

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Identifier generated for a newly inserted row."""

    id: int


class ChangeResponse(BaseModel):
    """Outcome of an update or delete."""

    message: str
    changes: int


class SuccessResponse(BaseModel):
    success: bool = True
