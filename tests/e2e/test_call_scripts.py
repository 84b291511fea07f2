"""E2E Test: Complete call scripts

Builds whole documents the way an application would before handing them
to the platform:
1. Simple greeting
2. IVR menu with a subroutine and a voicemail section
3. AI agent with callable functions
"""

import json

from swml import SwmlBuilder, SwmlDocument, StepValidator
from swml.schemas.methods import (
    AiParams,
    ConnectSerialParallel,
    PromptParams,
    RecordParams,
    SwaigFunction,
)
from swml.schemas.statements import CondParams, ExecuteParams, SwitchParams


def _step_names(steps: list) -> list[str]:
    return [step if isinstance(step, str) else next(iter(step)) for step in steps]


def test_answer_play_hangup():
    """answer, play, hangup in order"""
    builder = SwmlBuilder(validate=False)
    builder.answer()
    builder.play({"url": "say:Hello"})
    document = builder.hangup()

    assert document == {"sections": {"main": ["answer", {"play": {"url": "say:Hello"}}, "hangup"]}}


def test_single_destination_connect():
    builder = SwmlBuilder(validate=False)
    document = builder.connect({"to": "+15551234567"})

    assert document == {"sections": {"main": [{"connect": {"to": "+15551234567"}}]}}


def test_subroutine_only():
    builder = SwmlBuilder(validate=False)
    builder.subroutine("greet", [{"answer": {}}, "hangup"])

    document = builder.get()
    assert document["sections"]["greet"] == [{"answer": {}}, "hangup"]
    assert document["sections"]["main"] == []


def test_ivr_menu():
    """Menu with a greeting subroutine, a switch and a voicemail fallback"""
    builder = SwmlBuilder(validate=True)

    builder.subroutine("greet", {"meta": {"owner": "support"}, "code": [{"play": {"url": "say:Welcome"}}]})

    builder.answer({"max_duration": 600})
    builder.execute(ExecuteParams(dest="greet"))
    builder.record_call({"control_id": "call-rec", "stereo": True, "format": "mp3"})
    builder.prompt(PromptParams(play="say:Press 1 for sales, 2 for support", max_digits=1, terminators="#"))
    builder.switch(
        SwitchParams(
            variable="prompt_value",
            case={
                "1": [{"connect": {"to": "+15551110000"}}],
                "2": [{"transfer": {"dest": "voicemail"}}],
            },
            default=[{"hangup": "decline"}],
        )
    )
    builder.stop_record_call({"control_id": "call-rec"})
    builder.hangup()

    voicemail = builder.section("voicemail")
    voicemail.play({"url": "say:Leave a message after the beep"})
    voicemail.record(RecordParams(beep=True, end_silence_timeout=3.0))
    voicemail.hangup()

    document = builder.get()
    assert _step_names(document["sections"]["main"]) == [
        "answer",
        "execute",
        "record_call",
        "prompt",
        "switch",
        "stop_record_call",
        "hangup",
    ]
    assert document["sections"]["main"][4]["switch"]["default"] == [{"hangup": "decline"}]
    assert document["sections"]["voicemail"] == [
        {"play": {"url": "say:Leave a message after the beep"}},
        {"record": {"beep": True, "end_silence_timeout": 3.0}},
        "hangup",
    ]

    StepValidator().validate_document(document)
    assert SwmlDocument.from_json(builder.to_json()).to_dict() == document


def test_ai_agent_with_fallback():
    """AI agent with SWAIG functions, a condition and a dial fallback"""
    builder = SwmlBuilder(validate=True)
    builder.answer()
    builder.denoise()
    builder.ai(
        AiParams(
            voice="en-US-Neural2-F",
            prompt={"text": "You book appointments.", "temperature": 0.2, "top_p": 0.9},
            post_prompt={"text": "Summarize the call."},
            post_prompt_url="https://example.com/summary",
            hints=["appointment", "reschedule"],
            SWAIG={
                "functions": [
                    SwaigFunction(
                        function="book",
                        purpose="book an appointment",
                        argument="date and time",
                        web_hook_url="https://example.com/book",
                    )
                ]
            },
        )
    )
    builder.cond(
        [
            CondParams(
                when="vars.transfer_requested == true",
                then=[{"connect": {"serial_parallel": [["+15550000001", "+15550000002"], ["+15550000003"]]}}],
                else_=["hangup"],
            )
        ]
    )
    builder.stop_denoise()
    builder.connect(ConnectSerialParallel(serial_parallel=[["sip:a@example.com"]], ringback=["ring:us"]))

    main = json.loads(builder.to_json())["sections"]["main"]

    assert main[0] == "answer"
    assert main[1] == "denoise"
    assert main[2]["ai"]["SWAIG"]["functions"][0] == {
        "function": "book",
        "purpose": "book an appointment",
        "argument": "date and time",
        "web_hook_url": "https://example.com/book",
    }
    assert main[2]["ai"]["prompt"] == {"text": "You book appointments.", "temperature": 0.2, "top_p": 0.9}
    assert main[3]["cond"][0]["else"] == ["hangup"]
    assert main[4] == "stop_denoise"
    assert main[5] == {"connect": {"serial_parallel": [["sip:a@example.com"]], "ringback": ["ring:us"]}}
