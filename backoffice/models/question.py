"""Quiz question model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.core.storage import Base
from backoffice.models._time import utc_now


class Question(Base):
    """Multiple-choice question: one correct answer and three decoys."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    filiere_id: Mapped[int | None] = mapped_column(
        ForeignKey("filieres.id"), nullable=True, index=True
    )
    question: Mapped[str | None] = mapped_column(Text, nullable=True)
    bonne_reponse: Mapped[str] = mapped_column(Text, nullable=False)
    mauvaise1: Mapped[str | None] = mapped_column(Text, nullable=True)
    mauvaise2: Mapped[str | None] = mapped_column(Text, nullable=True)
    mauvaise3: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )
