"""Database models."""

from backoffice.models.candidature import Candidature, CandidatureAnswer
from backoffice.models.cohort import Cohort
from backoffice.models.learner import Learner, LearnerComment
from backoffice.models.program import Program
from backoffice.models.question import Question
from backoffice.models.staff import StaffMember, TrainerCertification

__all__ = [
    "Candidature",
    "CandidatureAnswer",
    "Cohort",
    "Learner",
    "LearnerComment",
    "Program",
    "Question",
    "StaffMember",
    "TrainerCertification",
]
