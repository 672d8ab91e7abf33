"""Learner (apprenant) and follow-up comment models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.core.storage import Base
from backoffice.models._time import utc_now

LEARNER_STATUSES = ("inscrit", "en_cours", "termine", "abandonne")


class Learner(Base):
    """Learner enrolled in a cohort."""

    __tablename__ = "apprenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nom: Mapped[str | None] = mapped_column(String(255), nullable=True)
    prenom: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    telephone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    statut: Mapped[str] = mapped_column(String(50), default="inscrit", nullable=False)
    promo_id: Mapped[int | None] = mapped_column(
        ForeignKey("promotions.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )


class LearnerComment(Base):
    """Follow-up note attached to a learner."""

    __tablename__ = "commentaires"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    apprenant_id: Mapped[int] = mapped_column(
        ForeignKey("apprenants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    contenu: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_creation: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )
