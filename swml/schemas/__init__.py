"""SWML schema types."""

from swml.schemas.document import (
    MAIN_SECTION,
    Section,
    Sections,
    Step,
    SwmlDocument,
    SwmlModel,
    new_document,
    to_params,
)
from swml.schemas.enums import (
    STATEMENTS,
    BareMethod,
    DenoiseResult,
    HangupReason,
    HttpMethod,
    RecordDirection,
    RecordFormat,
    StepName,
    TapCodec,
    TapScheme,
)
from swml.schemas.methods import (
    CONNECT_DESTINATIONS,
    AiLanguage,
    AiParams,
    AiPrompt,
    AnswerParams,
    ConnectBase,
    ConnectParallel,
    ConnectParams,
    ConnectSerial,
    ConnectSerialParallel,
    ConnectTo,
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
    Swaig,
    SwaigDefaults,
    SwaigFunction,
    TapParams,
)
from swml.schemas.statements import (
    CondParams,
    ExecuteParams,
    RequestParams,
    ReturnParams,
    SetParams,
    SwitchParams,
    TransferParams,
    UnsetParams,
)

__all__ = [
    "CONNECT_DESTINATIONS",
    "MAIN_SECTION",
    "STATEMENTS",
    "AiLanguage",
    "AiParams",
    "AiPrompt",
    "AnswerParams",
    "BareMethod",
    "CondParams",
    "ConnectBase",
    "ConnectParallel",
    "ConnectParams",
    "ConnectSerial",
    "ConnectSerialParallel",
    "ConnectTo",
    "DenoiseParams",
    "DenoiseResult",
    "ExecuteParams",
    "HangupParams",
    "HangupReason",
    "HttpMethod",
    "JoinRoomParams",
    "PlayParams",
    "PromptParams",
    "RecordCallParams",
    "RecordDirection",
    "RecordFormat",
    "RecordParams",
    "RequestParams",
    "ReturnParams",
    "Section",
    "Sections",
    "SendDigitsParams",
    "SendFaxParams",
    "SendSmsParams",
    "SetParams",
    "SipReferParams",
    "Step",
    "StepName",
    "StopDenoiseParams",
    "StopRecordCallParams",
    "StopTapParams",
    "Swaig",
    "SwaigDefaults",
    "SwaigFunction",
    "SwitchParams",
    "SwmlDocument",
    "SwmlModel",
    "TapCodec",
    "TapParams",
    "TapScheme",
    "TransferParams",
    "UnsetParams",
    "new_document",
    "to_params",
]
