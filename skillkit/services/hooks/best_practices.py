"""
UserPromptSubmit hook that suggests live documentation research when the user
asks about best practices.
"""

import re
import sys

from skillkit.core.monitoring import init_sentry
from skillkit.services.hooks.models import UserPromptSubmitHookInput, read_hook_input

BEST_PRACTICES_PATTERN = re.compile(r"best\s*practices?", re.IGNORECASE)

RESEARCH_REMINDER = """
[Best Practices Research]
You mentioned "best practices" - consider using Context7 for up-to-date documentation.

Would you like me to:
1. Search Context7 for current best practices on the relevant technology?
2. Proceed with my existing knowledge?

To search, I'll use mcp__context7__resolve-library-id → mcp__context7__get-library-docs"""


def mentions_best_practices(prompt: str) -> bool:
    return bool(BEST_PRACTICES_PATTERN.search(prompt))


def main() -> None:
    init_sentry()

    hook_input = read_hook_input(UserPromptSubmitHookInput)
    prompt = hook_input.prompt if hook_input is not None else ""

    if mentions_best_practices(prompt):
        print(RESEARCH_REMINDER)
    sys.exit(0)


if __name__ == "__main__":
    main()
