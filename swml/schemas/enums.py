"""Literal value sets used by SWML parameter objects."""

from enum import Enum


class StepName(str, Enum):
    """Every statement and method name a step can be keyed by."""

    # Statements
    TRANSFER = "transfer"
    EXECUTE = "execute"
    RETURN = "return"
    REQUEST = "request"
    SWITCH = "switch"
    COND = "cond"
    SET = "set"
    UNSET = "unset"

    # Methods
    ANSWER = "answer"
    HANGUP = "hangup"
    PROMPT = "prompt"
    PLAY = "play"
    RECORD = "record"
    RECORD_CALL = "record_call"
    STOP_RECORD_CALL = "stop_record_call"
    JOIN_ROOM = "join_room"
    DENOISE = "denoise"
    STOP_DENOISE = "stop_denoise"
    RECEIVE_FAX = "receive_fax"
    SEND_FAX = "send_fax"
    SIP_REFER = "sip_refer"
    CONNECT = "connect"
    TAP = "tap"
    STOP_TAP = "stop_tap"
    SEND_DIGITS = "send_digits"
    SEND_SMS = "send_sms"
    AI = "ai"


STATEMENTS = frozenset(
    {
        StepName.TRANSFER,
        StepName.EXECUTE,
        StepName.RETURN,
        StepName.REQUEST,
        StepName.SWITCH,
        StepName.COND,
        StepName.SET,
        StepName.UNSET,
    }
)


class BareMethod(str, Enum):
    """Methods that may appear in a section as a bare string."""

    ANSWER = "answer"
    HANGUP = "hangup"
    STOP_RECORD_CALL = "stop_record_call"
    DENOISE = "denoise"
    STOP_DENOISE = "stop_denoise"
    RECEIVE_FAX = "receive_fax"
    STOP_TAP = "stop_tap"


class HangupReason(str, Enum):
    """Reasons accepted by hangup."""

    HANGUP = "hangup"
    BUSY = "busy"
    DECLINE = "decline"


class HttpMethod(str, Enum):
    """Request verbs accepted by the request statement."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RecordFormat(str, Enum):
    """Recording file formats."""

    WAV = "wav"
    MP3 = "mp3"


class RecordDirection(str, Enum):
    """Which leg of the audio to record or tap."""

    SPEAK = "speak"  # what the party says
    HEAR = "hear"  # what the party hears
    BOTH = "both"


class TapCodec(str, Enum):
    """Codecs for tap media streams."""

    PCMU = "PCMU"
    PCMA = "PCMA"


class TapScheme(str, Enum):
    """URI schemes a tap stream can be sent to."""

    RTP = "rtp"
    WS = "ws"
    WSS = "wss"


class DenoiseResult(str, Enum):
    """Result echoed back by denoise and stop_denoise."""

    ON = "on"
    FAILED = "failed"
    OFF = "off"
