"""Utility functions and classes."""

from backoffice.utils.validators import ValidationResult, validate_decision

__all__ = ["ValidationResult", "validate_decision"]
