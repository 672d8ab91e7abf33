"""Schemas for learners and their follow-up comments."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from backoffice.models.learner import LEARNER_STATUSES


class LearnerBase(BaseModel):
    nom: str | None = None
    prenom: str | None = None
    email: str | None = None
    telephone: str | None = None
    promo_id: int | None = Field(None, description="Cohort ID")


class LearnerCreate(LearnerBase):
    statut: str = Field(
        default="inscrit",
        description=f"One of {', '.join(LEARNER_STATUSES)}",
    )


class LearnerOut(LearnerBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    statut: str
    created_at: datetime


class LearnerListItem(LearnerOut):
    """Learner with cohort and program names."""

    promo_nom: str | None = None
    filiere_nom: str | None = None


class CommentCreate(BaseModel):
    apprenant_id: int
    type: str | None = Field(None, description="Comment category")
    contenu: str | None = None


class CommentOut(CommentCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date_creation: datetime
