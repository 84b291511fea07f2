"""Method parameter objects (call control and media).

Defaults noted in docstrings and comments are the platform's. They are
applied by the platform when a field is omitted, never by this package.
"""

from typing import Any

from pydantic import Field

from swml.schemas.document import SwmlModel
from swml.schemas.enums import (
    DenoiseResult,
    HangupReason,
    RecordDirection,
    RecordFormat,
    TapCodec,
)


class AnswerParams(SwmlModel):
    """Answer the call."""

    max_duration: int | None = None  # seconds, min 7, default 14100


class HangupParams(SwmlModel):
    """End the call."""

    reason: HangupReason


class PromptParams(SwmlModel):
    """Play a prompt and wait for digit or speech input.

    Speech detection is only enabled when a speech parameter is set. When
    only speech parameters are set, digit detection is disabled. Set at
    least one of each to collect both.

    ``play`` entries are ``http(s)://`` audio files, ``ring:[duration:]<cc>``,
    ``say:<text>`` or ``silence:<seconds>``.
    """

    play: str | list[str]
    volume: float | None = None
    say_voice: str | None = None  # Polly.Salli
    say_language: str | None = None  # en-US
    say_gender: str | None = None  # female
    max_digits: int | None = None  # 1
    terminators: str | None = None
    digit_timeout: float | None = None  # 5.0
    initial_timeout: float | None = None  # 5.0
    speech_timeout: float | None = None
    speech_end_timeout: float | None = None
    speech_language: str | None = None
    speech_hints: list[str] | None = None


class PlayParams(SwmlModel):
    """Play file(s), ringtones, speech or silence without waiting for input."""

    url: str | None = None
    urls: list[str] | None = None
    volume: float | None = None  # -40.0 to 40.0
    say_voice: str | None = None
    say_language: str | None = None
    say_gender: str | None = None


class RecordParams(SwmlModel):
    """Record call audio in the foreground, e.g. a voicemail."""

    stereo: bool | None = None
    format: RecordFormat | None = None
    direction: RecordDirection | None = None  # speak
    terminators: str | None = None  # "#"
    beep: bool | None = None
    input_sensitivity: float | None = None  # 0.0 to 100.0, default 44.0
    initial_timeout: float | None = None
    end_silence_timeout: float | None = None


class RecordCallParams(RecordParams):
    """Record the call in the background.

    Without ``control_id`` the platform generates one and stores it in the
    ``record_control_id`` variable. Direction defaults to ``both``.
    """

    control_id: str | None = None


class StopRecordCallParams(SwmlModel):
    """Stop a background recording, the most recent one if no id is given."""

    control_id: str | None = None


class JoinRoomParams(SwmlModel):
    name: str


class DenoiseParams(SwmlModel):
    denoise_result: DenoiseResult | None = None  # on or failed


class StopDenoiseParams(SwmlModel):
    denoise_result: DenoiseResult | None = None  # always off


class SendFaxParams(SwmlModel):
    """Send a PDF document as a fax."""

    document: str
    header_info: str | None = None
    identity: str | None = None  # caller ID number


class SipReferParams(SwmlModel):
    to_uri: str


class ConnectBase(SwmlModel):
    """Dialing options shared by every connect destination shape.

    Headers, codecs, webrtc_media and session_timeout only apply to SIP
    destinations.
    """

    from_: str | None = Field(default=None, alias="from")
    headers: dict[str, Any] | None = None
    codecs: str | None = None
    webrtc_media: bool | None = None
    session_timeout: int | None = None
    ringback: list[str] | None = None


class ConnectTo(ConnectBase):
    """Dial a single destination."""

    to: str


class ConnectSerial(ConnectBase):
    """Dial destinations one after another."""

    serial: list[str]


class ConnectParallel(ConnectBase):
    """Dial destinations simultaneously."""

    parallel: list[str]


class ConnectSerialParallel(ConnectBase):
    """Dial parallel groups one group at a time."""

    serial_parallel: list[list[str]]


# Exactly one destination shape per connect; not enforced when building
ConnectParams = ConnectTo | ConnectSerial | ConnectParallel | ConnectSerialParallel

CONNECT_DESTINATIONS = ("to", "serial", "parallel", "serial_parallel")


class TapParams(SwmlModel):
    """Stream call media to an ``rtp://``, ``ws://`` or ``wss://`` URI."""

    uri: str
    control_id: str | None = None  # stored in tap_control_id when generated
    direction: RecordDirection | None = None  # both
    codec: TapCodec | None = None  # PCMU
    rtp_ptime: int | None = None  # ms, RTP only, default 20


class StopTapParams(SwmlModel):
    control_id: str | None = None


class SendDigitsParams(SwmlModel):
    """DTMF digits: 0-9 * # A-D, W pauses 1s, w pauses 500ms."""

    digits: str


class SendSmsParams(SwmlModel):
    """Send an SMS or MMS to a PSTN number. Needs ``body`` or ``media``."""

    to_number: str
    from_number: str
    body: str | None = None
    media: list[str] | None = None
    region: str | None = None
    tags: list[str] | None = None


class AiPrompt(SwmlModel):
    text: str | None = None
    temperature: float | None = None
    top_p: float | None = None
    confidence: float | None = None
    barge_confidence: float | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None


class SwaigDefaults(SwmlModel):
    web_hook_url: str | None = None
    web_hook_auth_user: str | None = None
    web_hook_auth_pass: str | None = None
    meta_data: dict[str, Any] | None = None


class SwaigFunction(SwmlModel):
    """A function the agent may call during the conversation."""

    function: str
    purpose: str
    argument: str
    web_hook_url: str | None = None
    web_hook_auth_user: str | None = None
    web_hook_auth_pass: str | None = None


class Swaig(SwmlModel):
    defaults: SwaigDefaults | None = None
    functions: list[SwaigFunction] | None = None


class AiLanguage(SwmlModel):
    name: str | None = None
    code: str | None = None
    voice: str | None = None


class AiParams(SwmlModel):
    """Hand the call to a conversational AI agent."""

    engine: str | None = None
    voice: str | None = None
    prompt: AiPrompt | None = None
    post_prompt: AiPrompt | None = None
    post_prompt_url: str | None = None
    post_prompt_auth_user: str | None = None
    post_prompt_auth_password: str | None = None
    params: dict[str, Any] | None = None
    swaig: Swaig | None = Field(default=None, alias="SWAIG")
    hints: list[str] | None = None
    languages: list[AiLanguage] | None = None
