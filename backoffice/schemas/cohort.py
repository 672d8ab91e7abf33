"""Schemas for cohorts (promotions)."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CohortBase(BaseModel):
    nom: str = Field(..., description="Cohort name")
    photo: str | None = None
    referent_id: int | None = Field(None, description="Referent staff member ID")
    filiere_id: int | None = Field(None, description="Program ID")
    date_debut: date | None = None
    date_fin: date | None = None
    date_debut_examen: date | None = None
    date_fin_examen: date | None = None
    stage_obligatoire: bool = Field(default=False, description="Internship required")
    objectifs: str | None = None

    @field_validator("stage_obligatoire", mode="before")
    @classmethod
    def _none_is_false(cls, value):
        return False if value is None else value


class CohortCreate(CohortBase):
    """Request to create or replace a cohort."""


class CohortOut(CohortBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class CohortListItem(CohortOut):
    """Cohort with its program and referent names."""

    filiere_nom: str | None = None
    referent_nom: str | None = None
    referent_prenom: str | None = None
