"""SWML document builder."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from swml.config import get_settings
from swml.schemas.document import MAIN_SECTION, Section, Step, new_document, to_params
from swml.schemas.enums import BareMethod, HangupReason, StepName
from swml.schemas.methods import (
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
from swml.services.validator import StepValidator

logger = logging.getLogger(__name__)

Params = dict[str, Any]
Document = dict[str, Any]

_BARE_METHODS = {method.value for method in BareMethod}


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return to_params(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class SwmlBuilder:
    """
    Accumulates one SWML document.

    Every append method adds exactly one step to the end of the target
    section (``main`` unless the builder came from :meth:`section`) and
    returns the whole document. Parameters are not checked unless
    validation is turned on.

    Example:
        builder = SwmlBuilder()
        builder.answer()
        builder.play({"url": "say:Hello"})
        builder.hangup()
        builder.get()
        # {"sections": {"main": ["answer", {"play": {"url": "say:Hello"}}, "hangup"]}}
    """

    def __init__(
        self,
        validate: bool | None = None,
        *,
        document: Document | None = None,
        section: str = MAIN_SECTION,
    ):
        """
        Initialize the builder.

        Args:
            validate: Check each step before appending. Defaults to the
                ``SWML_VALIDATE_STEPS`` setting.
            document: Existing document to keep appending to
            section: Section the append methods write to
        """
        if validate is None:
            validate = get_settings().validate_steps

        self._document: Document = document if document is not None else new_document()
        self._document.setdefault("sections", {}).setdefault(MAIN_SECTION, [])
        self._section = section
        self._validator = StepValidator() if validate else None

    @property
    def section_name(self) -> str:
        """Name of the section this builder appends to."""
        return self._section

    def get(self) -> Document:
        """Return the document as accumulated so far."""
        return self._document

    def section(self, name: str) -> "SwmlBuilder":
        """Get a builder that appends to another section of the same document."""
        return SwmlBuilder(
            validate=self._validator is not None,
            document=self._document,
            section=name,
        )

    def to_json(self, indent: int | None = None) -> str:
        """Serialize the document for delivery to the platform."""
        if indent is None:
            indent = get_settings().json_indent
        return json.dumps(self._document, indent=indent, default=_json_default)

    def _steps(self) -> Section:
        sections = self._document["sections"]
        target = sections.get(self._section)
        if target is None:
            target = sections[self._section] = []
        elif isinstance(target, Mapping):
            target = target.setdefault("code", [])
        return target

    def _push(self, name: StepName, params: Any) -> Document:
        if self._validator is not None:
            self._validator.validate_step(name.value, params)

        if params is None and name.value in _BARE_METHODS:
            step: Step = name.value
        else:
            step = {name.value: to_params(params)}
        steps = self._steps()
        steps.append(step)
        logger.debug("Appended %s to %s (%d steps)", name.value, self._section, len(steps))
        return self._document

    # Statements

    def transfer(self, params: TransferParams | Params) -> Document:
        """Transfer execution to a section, URL or RELAY context, like a goto."""
        return self._push(StepName.TRANSFER, params)

    def execute(self, params: ExecuteParams | Params) -> Document:
        """Execute a section or URL as a subroutine and return to this document."""
        return self._push(StepName.EXECUTE, params)

    def return_(self, value: Any = None) -> Document:
        """Return from ``execute`` or exit the script."""
        return self._push(StepName.RETURN, value)

    def request(self, params: RequestParams | Params) -> Document:
        """Send a GET, POST, PUT or DELETE request to a remote URL."""
        return self._push(StepName.REQUEST, params)

    def switch(self, params: SwitchParams | Params) -> Document:
        """Run the steps whose case matches a variable's value."""
        return self._push(StepName.SWITCH, params)

    def cond(self, params: CondParams | list[CondParams] | Params | list[Params]) -> Document:
        """Run steps depending on a JavaScript condition."""
        return self._push(StepName.COND, params)

    def set(self, variables: Params) -> Document:
        """Set script variables."""
        return self._push(StepName.SET, variables)

    def unset(self, params: UnsetParams | Params) -> Document:
        """Unset the given variables."""
        return self._push(StepName.UNSET, params)

    # Methods

    def answer(self, params: AnswerParams | Params | int | None = None) -> Document:
        """Answer the call, optionally with a maximum duration."""
        return self._push(StepName.ANSWER, params)

    def hangup(self, params: HangupReason | str | HangupParams | Params | None = None) -> Document:
        """End the call, optionally with a reason."""
        return self._push(StepName.HANGUP, params)

    def prompt(self, params: PromptParams | Params) -> Document:
        """
        Play a prompt and wait for digit or speech input.

        Speech detection is only enabled when a speech parameter is set;
        digit detection is disabled when only speech parameters are set.
        """
        return self._push(StepName.PROMPT, params)

    def play(self, params: PlayParams | Params) -> Document:
        """Play file(s), ringtones, speech or silence."""
        return self._push(StepName.PLAY, params)

    def record(self, params: RecordParams | Params) -> Document:
        """Record call audio in the foreground, e.g. for voicemail."""
        return self._push(StepName.RECORD, params)

    def record_call(self, params: RecordCallParams | Params) -> Document:
        """Record the call in the background."""
        return self._push(StepName.RECORD_CALL, params)

    def stop_record_call(self, params: StopRecordCallParams | Params | None = None) -> Document:
        """Stop an active background recording."""
        return self._push(StepName.STOP_RECORD_CALL, params)

    def join_room(self, params: JoinRoomParams | Params) -> Document:
        """Join a RELAY room."""
        return self._push(StepName.JOIN_ROOM, params)

    def denoise(self, params: DenoiseParams | Params | None = None) -> Document:
        """Start noise reduction."""
        return self._push(StepName.DENOISE, params)

    def stop_denoise(self, params: StopDenoiseParams | Params | None = None) -> Document:
        """Stop noise reduction."""
        return self._push(StepName.STOP_DENOISE, params)

    def receive_fax(self, params: str | Params | None = None) -> Document:
        """Receive a fax being delivered to this call."""
        return self._push(StepName.RECEIVE_FAX, params)

    def send_fax(self, params: SendFaxParams | Params) -> Document:
        return self._push(StepName.SEND_FAX, params)

    def sip_refer(self, params: SipReferParams | Params) -> Document:
        """Send a SIP REFER to a SIP call."""
        return self._push(StepName.SIP_REFER, params)

    def connect(self, params: ConnectParams | Params) -> Document:
        """
        Dial a SIP URI or phone number.

        Set exactly one of ``to``, ``serial``, ``parallel`` or
        ``serial_parallel``.
        """
        return self._push(StepName.CONNECT, params)

    def tap(self, params: TapParams | Params) -> Document:
        """Start a background tap streaming media over WebSocket or RTP."""
        return self._push(StepName.TAP, params)

    def stop_tap(self, params: StopTapParams | Params | None = None) -> Document:
        """Stop an active tap stream."""
        return self._push(StepName.STOP_TAP, params)

    def send_digits(self, params: SendDigitsParams | Params) -> Document:
        """Send digit presses as DTMF tones."""
        return self._push(StepName.SEND_DIGITS, params)

    def send_sms(self, params: SendSmsParams | Params) -> Document:
        """Send an outbound message to a PSTN phone number."""
        return self._push(StepName.SEND_SMS, params)

    def ai(self, params: AiParams | Params) -> Document:
        """Connect the call to an AI agent."""
        return self._push(StepName.AI, params)

    # Sections

    def subroutine(self, name: str, body: Section | Params) -> Document:
        """
        Register a section that ``execute`` can call.

        The body is either a list of steps or a mapping with ``meta`` (user
        data) and ``code`` (the steps). An existing section with the same
        name, ``main`` included, is replaced.
        """
        if self._validator is not None:
            code = body.get("code", []) if isinstance(body, Mapping) else body
            self._validator.validate_steps(code, section=name)

        self._document["sections"][name] = body
        logger.debug("Registered section %s", name)
        return self._document
