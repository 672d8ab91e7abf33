"""Pydantic schemas for request/response validation."""

from backoffice.schemas.candidature import (
    CandidatureCreate,
    CandidatureResult,
    DecisionRequest,
)
from backoffice.schemas.common import ChangeResponse, CreatedResponse

__all__ = [
    "CandidatureCreate",
    "CandidatureResult",
    "ChangeResponse",
    "CreatedResponse",
    "DecisionRequest",
]
