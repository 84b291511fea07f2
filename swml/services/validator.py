"""Opt-in structural validation for SWML steps and documents.

The builder itself accepts anything. This layer is used when a caller asks
for it (``SwmlBuilder(validate=True)`` or ``SWML_VALIDATE_STEPS=true``) and
checks the rules the platform documents but the builder never enforces.
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from pydantic import TypeAdapter, ValidationError

from swml.schemas.document import MAIN_SECTION, SwmlDocument, to_params
from swml.schemas.enums import BareMethod, HangupReason, StepName, TapScheme
from swml.schemas.methods import (
    CONNECT_DESTINATIONS,
    AiParams,
    AnswerParams,
    ConnectParams,
    DenoiseParams,
    HangupParams,
    JoinRoomParams,
    PlayParams,
    PromptParams,
    RecordCallParams,
    RecordParams,
    SendDigitsParams,
    SendFaxParams,
    SendSmsParams,
    SipReferParams,
    StopDenoiseParams,
    StopRecordCallParams,
    StopTapParams,
    TapParams,
)
from swml.schemas.statements import (
    CondParams,
    ExecuteParams,
    RequestParams,
    SwitchParams,
    TransferParams,
    UnsetParams,
)

logger = logging.getLogger(__name__)


class SwmlValidationError(ValueError):
    """Raised when a step or document breaks the SWML schema."""

    def __init__(self, action: str, errors: list[str]):
        self.action = action
        self.errors = errors
        super().__init__(f"Invalid {action}: {'; '.join(errors)}")


_ADAPTERS: dict[StepName, TypeAdapter] = {
    StepName.TRANSFER: TypeAdapter(TransferParams),
    StepName.EXECUTE: TypeAdapter(ExecuteParams),
    StepName.RETURN: TypeAdapter(Any),
    StepName.REQUEST: TypeAdapter(RequestParams),
    StepName.SWITCH: TypeAdapter(SwitchParams),
    StepName.COND: TypeAdapter(CondParams | list[CondParams]),
    StepName.SET: TypeAdapter(dict[str, Any]),
    StepName.UNSET: TypeAdapter(UnsetParams),
    StepName.ANSWER: TypeAdapter(int | AnswerParams),
    StepName.HANGUP: TypeAdapter(HangupReason | HangupParams),
    StepName.PROMPT: TypeAdapter(PromptParams),
    StepName.PLAY: TypeAdapter(PlayParams),
    StepName.RECORD: TypeAdapter(RecordParams),
    StepName.RECORD_CALL: TypeAdapter(RecordCallParams),
    StepName.STOP_RECORD_CALL: TypeAdapter(StopRecordCallParams),
    StepName.JOIN_ROOM: TypeAdapter(JoinRoomParams),
    StepName.DENOISE: TypeAdapter(DenoiseParams),
    StepName.STOP_DENOISE: TypeAdapter(StopDenoiseParams),
    StepName.RECEIVE_FAX: TypeAdapter(str | dict[str, Any]),
    StepName.SEND_FAX: TypeAdapter(SendFaxParams),
    StepName.SIP_REFER: TypeAdapter(SipReferParams),
    StepName.CONNECT: TypeAdapter(ConnectParams),
    StepName.TAP: TypeAdapter(TapParams),
    StepName.STOP_TAP: TypeAdapter(StopTapParams),
    StepName.SEND_DIGITS: TypeAdapter(SendDigitsParams),
    StepName.SEND_SMS: TypeAdapter(SendSmsParams),
    StepName.AI: TypeAdapter(AiParams),
}

_BARE_METHODS = {method.value for method in BareMethod}


def _format_errors(exc: ValidationError) -> list[str]:
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        errors.append(f"{location}: {error['msg']}" if location else error["msg"])
    return errors


class StepValidator:
    """Checks steps against their parameter models and documented rules."""

    def validate_step(self, name: str, params: Any = None) -> None:
        """
        Validate a single step.

        Args:
            name: Action name the step is keyed by
            params: Parameter object, or None for a bare method

        Raises:
            SwmlValidationError: If the step does not match its schema
        """
        try:
            action = StepName(name)
        except ValueError:
            raise SwmlValidationError(name, [f"unknown action '{name}'"]) from None

        if params is None and action.value in _BARE_METHODS:
            return

        params = to_params(params)
        errors: list[str] = []

        if action == StepName.CONNECT:
            errors.extend(self._check_connect(params))
        elif action == StepName.TAP:
            errors.extend(self._check_tap(params))

        if not errors:
            try:
                _ADAPTERS[action].validate_python(params)
            except ValidationError as exc:
                errors.extend(_format_errors(exc))

        if not errors:
            errors.extend(self._check_nested(action, params))

        if errors:
            logger.debug("Rejected %s step: %s", action.value, errors)
            raise SwmlValidationError(action.value, errors)

    def validate_steps(self, steps: Any, section: str = MAIN_SECTION) -> None:
        """Validate an ordered list of steps."""
        if not isinstance(steps, list):
            raise SwmlValidationError(section, ["section must be a list of steps"])
        for step in steps:
            self._validate_entry(step, section)

    def validate_document(self, document: Mapping[str, Any]) -> None:
        """
        Validate a whole document, section by section.

        Subroutine sections in ``{"meta": ..., "code": [...]}`` form are
        checked through their ``code`` list.
        """
        try:
            parsed = SwmlDocument.model_validate(dict(document))
        except ValidationError as exc:
            raise SwmlValidationError("document", _format_errors(exc)) from exc

        for name, section in parsed.sections.items():
            if isinstance(section, Mapping):
                self.validate_steps(section.get("code", []), section=name)
            else:
                self.validate_steps(section, section=name)

    def _validate_entry(self, step: Any, section: str) -> None:
        if isinstance(step, str):
            if step not in _BARE_METHODS:
                raise SwmlValidationError(step, [f"'{step}' cannot be used without parameters in {section}"])
            return
        if not isinstance(step, Mapping) or len(step) != 1:
            raise SwmlValidationError(section, [f"step must be a single-key mapping, got {step!r}"])
        ((name, params),) = step.items()
        self.validate_step(name, params)

    def _check_connect(self, params: Any) -> list[str]:
        if not isinstance(params, Mapping):
            return ["connect parameters must be a mapping"]
        present = [key for key in CONNECT_DESTINATIONS if key in params]
        if len(present) != 1:
            return [f"exactly one of {', '.join(CONNECT_DESTINATIONS)} must be set, got {present or 'none'}"]
        return []

    def _check_tap(self, params: Any) -> list[str]:
        if not isinstance(params, Mapping) or not isinstance(params.get("uri"), str):
            return []
        scheme = urlsplit(params["uri"]).scheme
        if scheme not in {item.value for item in TapScheme}:
            return [f"uri: unsupported scheme '{scheme}'"]
        return []

    def _check_nested(self, action: StepName, params: Any) -> list[str]:
        """Validate steps nested inside cond and switch arms."""
        arms: list[Any] = []
        if action == StepName.COND:
            clauses = params if isinstance(params, list) else [params]
            for clause in clauses:
                arms.extend([clause.get("then", []), clause.get("else", [])])
        elif action == StepName.SWITCH:
            arms.extend((params.get("case") or {}).values())
            arms.append(params.get("default") or [])

        errors: list[str] = []
        for arm in arms:
            try:
                self.validate_steps(arm, section=action.value)
            except SwmlValidationError as exc:
                errors.extend(exc.errors)
        return errors
