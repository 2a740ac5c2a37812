import json
import sys
from typing import Any, Literal, TextIO, TypedDict


class HookResponse(TypedDict, total=False):
    decision: Literal["approve", "block"]
    reason: str
    continue_: bool
    stopReason: str
    suppressOutput: bool
    systemMessage: str
    hookSpecificOutput: dict[str, Any]


def send_response(response: HookResponse) -> str:
    """
    Serialize a hook response for the agent runtime.

    The runtime only reads JSON from stdout when the hook exits with code 0,
    so the response is a single line terminated by a newline.

    Args:
        response: The response object to send

    Returns:
        Serialized response as a string with newline
    """
    payload: dict[str, Any] = dict(response)

    # "continue" is a keyword, the TypedDict spells it with a trailing underscore
    if "continue_" in payload:
        payload["continue"] = payload.pop("continue_")

    return json.dumps(payload) + "\n"


def write_response(response: HookResponse, stream: TextIO | None = None) -> None:
    """Write a serialized hook response to stdout (or the given stream)."""
    out = stream if stream is not None else sys.stdout
    out.write(send_response(response))
    out.flush()
