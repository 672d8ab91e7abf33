"""Validation logic for admission decisions."""

from dataclasses import dataclass, field

from backoffice.models.candidature import CANDIDATURE_STATUSES, STATUS_REJECTED
from backoffice.schemas.candidature import DecisionRequest


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None
    warnings: list[str] = field(default_factory=list)


def validate_decision(request: DecisionRequest) -> ValidationResult:
    """Check a decision against the known statuses.

    A refusal must carry a justification. Re-deciding an application that
    already has a decision is allowed.
    """
    warnings = []

    if request.statut not in CANDIDATURE_STATUSES:
        return ValidationResult(
            is_valid=False,
            error=f"Unknown status: {request.statut!r}. "
            f"Expected one of {', '.join(CANDIDATURE_STATUSES)}",
        )

    justification = (request.justification_refus or "").strip()
    if request.statut == STATUS_REJECTED and not justification:
        return ValidationResult(
            is_valid=False,
            error="A justification is required when refusing an application",
        )

    if request.statut != STATUS_REJECTED and justification:
        warnings.append("Justification is only meaningful for a refusal")

    if not (request.decision_admin or "").strip():
        warnings.append("No administrative comment provided")

    return ValidationResult(is_valid=True, warnings=warnings)
