"""Admission application (candidature) and per-question answer models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.core.storage import Base
from backoffice.models._time import utc_now

STATUS_PENDING = "en_attente"
STATUS_ACCEPTED = "accepte"
STATUS_REJECTED = "refuse"

CANDIDATURE_STATUSES = (STATUS_PENDING, STATUS_ACCEPTED, STATUS_REJECTED)


class Candidature(Base):
    """A candidate's scored submission for admission to a program."""

    __tablename__ = "candidatures"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nom: Mapped[str | None] = mapped_column(String(255), nullable=True)
    prenom: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    motivation: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Not a foreign key: an application may name a program that has no row.
    filiere_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    date_candidature: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False, index=True
    )
    statut: Mapped[str | None] = mapped_column(
        String(50), default=STATUS_PENDING, nullable=True, index=True
    )
    decision_admin: Mapped[str | None] = mapped_column(Text, nullable=True)
    justification_refus: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_decision: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)


class CandidatureAnswer(Base):
    """Answer submitted for one question, with its correctness flag."""

    __tablename__ = "reponses_candidature"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    candidature_id: Mapped[int] = mapped_column(
        ForeignKey("candidatures.id"), nullable=False, index=True
    )
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id"), nullable=False, index=True
    )
    reponse_donnee: Mapped[str] = mapped_column(Text, nullable=False, default="")
    est_correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
