"""Schemas for admission applications and decisions.

Request bodies accept the dashboard's field names (``filiere_id``,
``reponses``, ``statut``...) as well as their English counterparts
(``programId``, ``answers``, ``status``...).
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CandidatureCreate(BaseModel):
    """Candidate identity, target program and ordered quiz answers."""

    nom: str | None = Field(None, description="Last name")
    prenom: str | None = Field(None, description="First name")
    email: str | None = None
    motivation: str | None = Field(None, description="Free-text motivation letter")
    filiere_id: int | None = Field(
        None,
        validation_alias=AliasChoices("filiere_id", "programId", "program_id"),
        description="Program applied to",
    )
    reponses: list[str | None] = Field(
        default_factory=list,
        validation_alias=AliasChoices("reponses", "answers"),
        description="Answers aligned by position with the program's questions",
    )

    @field_validator("reponses", mode="before")
    @classmethod
    def _null_answers(cls, value):
        return [] if value is None else value


class CandidatureResult(BaseModel):
    """Outcome of a submission."""

    id: int
    score: int
    total: int


class DecisionRequest(BaseModel):
    """Administrative decision on an application."""

    statut: str | None = Field(
        None,
        validation_alias=AliasChoices("statut", "status"),
        description="en_attente, accepte or refuse",
    )
    decision_admin: str | None = Field(
        None,
        validation_alias=AliasChoices("decision_admin", "adminComment", "admin_comment"),
    )
    justification_refus: str | None = Field(
        None,
        validation_alias=AliasChoices(
            "justification_refus", "rejectionJustification", "rejection_justification"
        ),
    )


class CandidatureOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nom: str | None = None
    prenom: str | None = None
    email: str | None = None
    motivation: str | None = None
    filiere_id: int | None = None
    score: int
    date_candidature: datetime
    statut: str | None = None
    decision_admin: str | None = None
    justification_refus: str | None = None
    date_decision: datetime | None = None


class CandidatureListItem(CandidatureOut):
    filiere_nom: str | None = None


class AnswerOut(BaseModel):
    """Recorded answer to one question."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    question_id: int
    question: str | None = None
    bonne_reponse: str | None = None
    reponse_donnee: str
    est_correct: bool


class CandidatureDetail(CandidatureListItem):
    reponses: list[AnswerOut] = Field(default_factory=list)
