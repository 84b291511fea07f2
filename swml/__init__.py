"""SWML document builder."""

from swml.config import Settings, configure_logging, get_settings
from swml.schemas import MAIN_SECTION, SwmlDocument
from swml.services import StepValidator, SwmlBuilder, SwmlValidationError

__all__ = [
    "MAIN_SECTION",
    "Settings",
    "StepValidator",
    "SwmlBuilder",
    "SwmlDocument",
    "SwmlValidationError",
    "configure_logging",
    "get_settings",
]
