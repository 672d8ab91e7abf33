"""Schemas for training programs."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProgramBase(BaseModel):
    nom: str = Field(..., description="Program name")
    description: str | None = None
    objectifs: str | None = None
    programme: str | None = Field(None, description="Syllabus summary")
    modalites: str | None = Field(None, description="On-site / remote arrangements")
    accessibilite: str | None = None
    image: str | None = Field(None, description="Illustration URL")


class ProgramCreate(ProgramBase):
    """Request to create or replace a program."""


class ProgramOut(ProgramBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
