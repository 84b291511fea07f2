"""Document building services."""

from swml.services.builder import SwmlBuilder
from swml.services.validator import StepValidator, SwmlValidationError

__all__ = ["StepValidator", "SwmlBuilder", "SwmlValidationError"]
