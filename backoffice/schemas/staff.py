"""Schemas for staff members and their certifications."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class StaffBase(BaseModel):
    nom: str | None = None
    prenom: str | None = None
    email: str | None = None
    role: str | None = Field(None, description="Formateur, Formatrice, ...")
    cv: str | None = Field(None, description="CV location")
    experience: str | None = None
    certifications: str | None = None


class StaffCreate(StaffBase):
    """Request to create or replace a staff member."""


class StaffOut(StaffBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class CertificationCreate(BaseModel):
    nom_formation: str | None = None
    organisme: str | None = None
    date_obtention: date | None = None
    certificat_pdf: str | None = None


class CertificationOut(CertificationCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    personnel_id: int
    created_at: datetime
