import logging
import sys
from typing import Any, TextIO, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class HookInput(BaseModel):
    """Fields shared by every hook payload."""

    model_config = ConfigDict(extra="allow")

    session_id: str | None = None
    transcript_path: str | None = None
    cwd: str = "."
    hook_event_name: str | None = None


class PostToolUseHookInput(HookInput):
    """Payload sent after the agent used a tool."""

    tool_name: str = ""
    tool_input: dict[str, Any] = {}
    tool_response: Any = None


class UserPromptSubmitHookInput(HookInput):
    """Payload sent when the user submits a prompt."""

    prompt: str = ""


HookInputT = TypeVar("HookInputT", bound=HookInput)


def read_hook_input(model: type[HookInputT], stream: TextIO | None = None) -> HookInputT | None:
    """
    Read and validate a hook payload from stdin (or the given stream).

    Returns:
        The parsed payload, or None if it is not valid JSON for the model
    """
    source = stream if stream is not None else sys.stdin

    try:
        return model.model_validate_json(source.read())
    except (UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Invalid {model.__name__} payload: {e}")
        return None
