"""
Event hooks for the agent runtime.
"""

from skillkit.services.hooks.agent_complete_tts import announce_completion
from skillkit.services.hooks.best_practices import mentions_best_practices
from skillkit.services.hooks.lint_check import check_lint
from skillkit.services.hooks.models import (
    HookInput,
    PostToolUseHookInput,
    UserPromptSubmitHookInput,
    read_hook_input,
)

__all__ = [
    "HookInput",
    "PostToolUseHookInput",
    "UserPromptSubmitHookInput",
    "announce_completion",
    "check_lint",
    "mentions_best_practices",
    "read_hook_input",
]
