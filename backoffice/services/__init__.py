"""Application services."""

from backoffice.services.application_service import (
    ApplicationService,
    create_application_service,
)
from backoffice.services.question_bank import QuestionBank

__all__ = ["ApplicationService", "QuestionBank", "create_application_service"]
