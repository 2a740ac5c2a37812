"""
PostToolUse hook that runs the project linter after the agent edits a file.

Lint failures are reported back to the agent with a "block" decision so it can
fix them. The runtime only reads the JSON response when the hook exits with
code 0, so every path exits 0.
"""

import json
import logging
import subprocess
import sys
from pathlib import Path

from skillkit.core.config import settings
from skillkit.core.monitoring import init_sentry
from skillkit.core.response import HookResponse, write_response
from skillkit.services.hooks.models import PostToolUseHookInput, read_hook_input

logger = logging.getLogger(__name__)

LINTABLE_EXTENSIONS: set[str] = {
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".mjs",
    ".cjs",
    ".mts",
    ".cts",
}


def is_lintable_file(file_path: str | None) -> bool:
    """Check if a file path has a lintable extension."""
    if not file_path:
        return False
    return Path(file_path).suffix in LINTABLE_EXTENSIONS


def has_lint_script(cwd: Path) -> bool:
    """Check if the project declares a lint script in package.json."""
    package_json_path = cwd / "package.json"
    if not package_json_path.exists():
        return False

    try:
        package_json = json.loads(package_json_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read {package_json_path}: {e}")
        return False

    if not isinstance(package_json, dict):
        return False
    scripts = package_json.get("scripts")
    return isinstance(scripts, dict) and bool(scripts.get("lint"))


def run_lint(cwd: Path) -> subprocess.CompletedProcess[str]:
    logger.info(f"Running {' '.join(settings.LINT_COMMAND)} in {cwd}")
    return subprocess.run(settings.LINT_COMMAND, cwd=cwd, capture_output=True, text=True, check=False)


def check_lint(hook_input: PostToolUseHookInput) -> tuple[bool, HookResponse | None]:
    """
    Lint the project if the edited file is lintable.

    Returns:
        tuple of (linted, response); response is a block decision when linting fails
    """
    file_path = hook_input.tool_input.get("file_path")
    if not is_lintable_file(file_path):
        return False, None

    cwd = Path(hook_input.cwd)
    if not has_lint_script(cwd):
        return False, None

    try:
        process = run_lint(cwd)
    except OSError as e:
        logger.warning(f"Could not run lint command: {e}")
        return False, None

    if process.returncode == 0:
        return True, None

    output = "\n".join(part for part in (process.stdout, process.stderr) if part).strip()
    return True, {"decision": "block", "reason": f"Linting failed. Please fix errors:\n\n{output}"}


def main() -> None:
    init_sentry()

    hook_input = read_hook_input(PostToolUseHookInput)
    if hook_input is None:
        sys.exit(0)

    linted, response = check_lint(hook_input)
    if response is not None:
        write_response(response)
    elif linted:
        print("Lint passed")
    sys.exit(0)


if __name__ == "__main__":
    main()
