from cssscope.validation.rules import ALL_RULES
from cssscope.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["ALL_RULES", "ValidationError", "validate", "validate_or_raise"]
