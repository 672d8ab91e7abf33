"""Schemas for quiz questions."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class QuestionCreate(BaseModel):
    filiere_id: int | None = Field(None, description="Program ID")
    question: str | None = None
    bonne_reponse: str = Field(..., description="Correct answer text")
    mauvaise1: str | None = None
    mauvaise2: str | None = None
    mauvaise3: str | None = None


class QuestionOut(QuestionCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
