"""Tests for decision validation."""

from backoffice.schemas.candidature import DecisionRequest
from backoffice.utils.validators import ValidationResult, validate_decision


class TestValidationResult:
    """Tests for ValidationResult dataclass."""

    def test_defaults(self):
        result = ValidationResult(is_valid=True)
        assert result.error is None
        assert result.warnings == []


class TestValidateDecision:
    """Tests for validate_decision."""

    def test_accept(self):
        result = validate_decision(
            DecisionRequest(statut="accepte", decision_admin="Très bon profil")
        )
        assert result.is_valid is True
        assert result.warnings == []

    def test_reject_with_justification(self):
        result = validate_decision(
            DecisionRequest(
                statut="refuse",
                decision_admin="Score insuffisant",
                justification_refus="Moins de 5 bonnes réponses",
            )
        )
        assert result.is_valid is True

    def test_reject_without_justification(self):
        result = validate_decision(DecisionRequest(statut="refuse"))
        assert result.is_valid is False
        assert "justification" in result.error.lower()

    def test_reject_with_blank_justification(self):
        result = validate_decision(
            DecisionRequest(statut="refuse", justification_refus="   ")
        )
        assert result.is_valid is False

    def test_unknown_status(self):
        result = validate_decision(DecisionRequest(statut="maybe"))
        assert result.is_valid is False
        assert "maybe" in result.error

    def test_missing_status(self):
        result = validate_decision(DecisionRequest())
        assert result.is_valid is False

    def test_back_to_pending_allowed(self):
        result = validate_decision(
            DecisionRequest(statut="en_attente", decision_admin="À revoir")
        )
        assert result.is_valid is True

    def test_warnings(self):
        result = validate_decision(
            DecisionRequest(statut="accepte", justification_refus="n/a")
        )
        assert result.is_valid is True
        assert len(result.warnings) == 2
