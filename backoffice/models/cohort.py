"""Cohort (promotion) model."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.core.storage import Base
from backoffice.models._time import utc_now


class Cohort(Base):
    """Scheduled instance of a program with a start and end date."""

    __tablename__ = "promotions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nom: Mapped[str] = mapped_column(String(255), nullable=False)
    photo: Mapped[str | None] = mapped_column(Text, nullable=True)
    referent_id: Mapped[int | None] = mapped_column(
        ForeignKey("personnel.id", ondelete="SET NULL"), nullable=True, index=True
    )
    date_debut: Mapped[date | None] = mapped_column(Date, nullable=True)
    date_fin: Mapped[date | None] = mapped_column(Date, nullable=True)
    date_debut_examen: Mapped[date | None] = mapped_column(Date, nullable=True)
    date_fin_examen: Mapped[date | None] = mapped_column(Date, nullable=True)
    stage_obligatoire: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    filiere_id: Mapped[int | None] = mapped_column(
        ForeignKey("filieres.id", ondelete="SET NULL"), nullable=True, index=True
    )
    objectifs: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )
