"""SWML document envelope.

A document maps section names to ordered lists of steps. The external
runtime starts at ``main`` and runs each section top to bottom. A step is
either a bare method name (``"answer"``) or a single-key mapping from an
action name to its parameters (``{"play": {"url": "say:Hi"}}``).
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

MAIN_SECTION = "main"

Step = str | dict[str, Any]
Section = list[Step]
# Subroutine sections may also be {"meta": {...}, "code": [...]}
Sections = dict[str, Section | dict[str, Any]]


class SwmlModel(BaseModel):
    """Base for parameter objects.

    Unknown fields are kept so newer platform options pass through.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


def to_params(value: Any) -> Any:
    """Convert a parameter object into its wire form.

    Only fields the caller actually set are emitted; nothing is defaulted.
    Plain mappings, lists and scalars are returned as given.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [to_params(item) for item in value]
    return value


def new_document() -> dict[str, Any]:
    """Create an empty document with its main section."""
    return {"sections": {MAIN_SECTION: []}}


class SwmlDocument(BaseModel):
    """Typed view over a complete document."""

    sections: Sections

    @field_validator("sections")
    @classmethod
    def require_main(cls, value: Sections) -> Sections:
        if MAIN_SECTION not in value:
            raise ValueError("SWML document must contain a 'main' section")
        return value

    @classmethod
    def from_json(cls, data: str | bytes) -> "SwmlDocument":
        """Load a document previously produced by a builder."""
        return cls.model_validate_json(data)

    def to_dict(self) -> dict[str, Any]:
        return {"sections": self.sections}

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
