"""
PostToolUse hook that announces finished sub-agents through text-to-speech.

Triggers after the Task tool. Announcements are skipped when a mute flag file
exists in the user or project runtime directory, or when no TTS script is
installed.
"""

import logging
import subprocess
import sys
from pathlib import Path

from skillkit.core.config import settings
from skillkit.core.monitoring import init_sentry
from skillkit.services.hooks.models import PostToolUseHookInput, read_hook_input

logger = logging.getLogger(__name__)

TASK_TOOL_NAME = "Task"


def is_muted(cwd: Path) -> bool:
    """Check the user-level and project-level mute flags."""
    mute_flags = [
        settings.CLAUDE_HOME / settings.TTS_MUTE_FLAG,
        cwd / ".claude" / settings.TTS_MUTE_FLAG,
    ]
    return any(flag.exists() for flag in mute_flags)


def build_announcement(tool_input: dict) -> str:
    description = tool_input.get("description") or "Agent task"
    subagent_type = tool_input.get("subagent_type") or "unknown"
    return f"{subagent_type} agent finished: {description}"[: settings.TTS_MESSAGE_MAX_LENGTH]


def play_tts(message: str) -> bool:
    """
    Run the TTS script with the given message.

    Returns:
        True if the script ran successfully
    """
    script = settings.tts_script_path
    if not script.exists():
        logger.debug(f"No TTS script at {script}")
        return False

    try:
        subprocess.run(["bash", str(script), message], check=True)
    except subprocess.CalledProcessError as e:
        logger.warning(f"TTS script exited with code {e.returncode}")
        return False
    except OSError as e:
        logger.warning(f"Could not run TTS script: {e}")
        return False
    return True


def announce_completion(hook_input: PostToolUseHookInput) -> str | None:
    """
    Announce a finished Task tool call.

    Returns:
        The message that was spoken, or None if nothing was announced
    """
    if hook_input.tool_name != TASK_TOOL_NAME:
        return None

    if is_muted(Path(hook_input.cwd)):
        logger.debug("TTS muted")
        return None

    message = build_announcement(hook_input.tool_input)
    if not play_tts(message):
        return None
    return message


def main() -> None:
    init_sentry()

    hook_input = read_hook_input(PostToolUseHookInput)
    if hook_input is not None:
        announce_completion(hook_input)
    sys.exit(0)


if __name__ == "__main__":
    main()
