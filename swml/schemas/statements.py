"""Statement parameter objects (control flow)."""

from typing import Any

from pydantic import Field

from swml.schemas.document import SwmlModel
from swml.schemas.enums import HttpMethod

# return and set take free-form mappings
ReturnParams = dict[str, Any]
SetParams = dict[str, Any]


class TransferParams(SwmlModel):
    """Jump to a section or URL, like a goto.

    ``dest`` is a section label, ``relay:<context>``, or an https URL the
    next document is POSTed for.
    """

    dest: str
    params: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None  # ignored by the platform


class ExecuteParams(SwmlModel):
    """Run a section or URL as a subroutine, then come back."""

    dest: str
    params: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None


class RequestParams(SwmlModel):
    """Send an HTTP request to a remote URL.

    Platform defaults: ``timeout`` and ``connect_timeout`` 5.0 seconds,
    ``save_variables`` false. Valid headers are Accept, Authorization,
    Content-Type, Range and custom X- headers.
    """

    url: str
    method: HttpMethod
    headers: dict[str, str] | None = None
    body: str | dict[str, Any] | None = None
    timeout: float | None = None
    connect_timeout: float | None = None
    save_variables: bool | None = None


class SwitchParams(SwmlModel):
    """Branch on the string value of a variable."""

    variable: str
    case: dict[str, list[Any]] | None = None
    default: list[Any] | None = None


class CondParams(SwmlModel):
    """Two-way branch on a JavaScript condition."""

    when: str
    then: list[Any]
    else_: list[Any] = Field(alias="else")


class UnsetParams(SwmlModel):
    """Names of the variables to unset."""

    vars: str | list[str]
