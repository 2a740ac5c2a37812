"""
Tests for the agent completion TTS hook.
"""

import io
import subprocess
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from skillkit.core.config import settings
from skillkit.services.hooks import agent_complete_tts
from skillkit.services.hooks.agent_complete_tts import (
    announce_completion,
    build_announcement,
    is_muted,
    play_tts,
)
from skillkit.services.hooks.models import PostToolUseHookInput


@pytest.fixture
def claude_home(tmp_path: Path, mocker: MockerFixture) -> Path:
    """Points the runtime home directory at a temporary directory."""
    home = tmp_path / "home" / ".claude"
    home.mkdir(parents=True)
    mocker.patch.object(settings, "CLAUDE_HOME", home)
    return home


@pytest.fixture
def tts_script(claude_home: Path) -> Path:
    script = claude_home / "hooks" / "play-tts.sh"
    script.parent.mkdir()
    script.write_text("#!/bin/bash\n")
    return script


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


def task_input(cwd: Path, **tool_input: str) -> PostToolUseHookInput:
    return PostToolUseHookInput(tool_name="Task", tool_input=tool_input, cwd=str(cwd))


class TestIsMuted:
    """Tests for the is_muted function."""

    def test_not_muted(self, claude_home: Path, project_dir: Path) -> None:
        assert is_muted(project_dir) is False

    def test_user_mute_flag(self, claude_home: Path, project_dir: Path) -> None:
        (claude_home / settings.TTS_MUTE_FLAG).touch()
        assert is_muted(project_dir) is True

    def test_project_mute_flag(self, claude_home: Path, project_dir: Path) -> None:
        (project_dir / ".claude").mkdir()
        (project_dir / ".claude" / settings.TTS_MUTE_FLAG).touch()
        assert is_muted(project_dir) is True


class TestBuildAnnouncement:
    """Tests for the build_announcement function."""

    def test_message(self) -> None:
        message = build_announcement({"description": "Review the diff", "subagent_type": "code-reviewer"})
        assert message == "code-reviewer agent finished: Review the diff"

    def test_defaults(self) -> None:
        assert build_announcement({}) == "unknown agent finished: Agent task"

    def test_truncated(self) -> None:
        message = build_announcement({"description": "x" * 500, "subagent_type": "general"})
        assert len(message) == settings.TTS_MESSAGE_MAX_LENGTH


class TestPlayTts:
    """Tests for the play_tts function."""

    def test_no_script(self, claude_home: Path, mocker: MockerFixture) -> None:
        run_mock = mocker.patch("skillkit.services.hooks.agent_complete_tts.subprocess.run")

        assert play_tts("hello") is False
        run_mock.assert_not_called()

    def test_runs_script(self, tts_script: Path, mocker: MockerFixture) -> None:
        run_mock = mocker.patch("skillkit.services.hooks.agent_complete_tts.subprocess.run")

        assert play_tts("hello") is True
        args, _ = run_mock.call_args
        assert args[0] == ["bash", str(tts_script), "hello"]

    def test_script_failure_is_not_raised(self, tts_script: Path, mocker: MockerFixture) -> None:
        mocker.patch(
            "skillkit.services.hooks.agent_complete_tts.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, ["bash"]),
        )
        assert play_tts("hello") is False

    def test_bash_missing(self, tts_script: Path, mocker: MockerFixture) -> None:
        mocker.patch("skillkit.services.hooks.agent_complete_tts.subprocess.run", side_effect=FileNotFoundError())
        assert play_tts("hello") is False


class TestAnnounceCompletion:
    """Tests for the announce_completion function."""

    def test_announces_task(self, tts_script: Path, project_dir: Path, mocker: MockerFixture) -> None:
        run_mock = mocker.patch("skillkit.services.hooks.agent_complete_tts.subprocess.run")

        message = announce_completion(task_input(project_dir, description="Fix tests", subagent_type="debugger"))

        assert message == "debugger agent finished: Fix tests"
        run_mock.assert_called_once()

    def test_ignores_other_tools(self, tts_script: Path, project_dir: Path, mocker: MockerFixture) -> None:
        run_mock = mocker.patch("skillkit.services.hooks.agent_complete_tts.subprocess.run")
        hook_input = PostToolUseHookInput(tool_name="Bash", tool_input={"command": "ls"}, cwd=str(project_dir))

        assert announce_completion(hook_input) is None
        run_mock.assert_not_called()

    def test_muted(self, tts_script: Path, project_dir: Path, mocker: MockerFixture) -> None:
        (settings.CLAUDE_HOME / settings.TTS_MUTE_FLAG).touch()
        run_mock = mocker.patch("skillkit.services.hooks.agent_complete_tts.subprocess.run")

        assert announce_completion(task_input(project_dir)) is None
        run_mock.assert_not_called()


def test_main_always_exits_zero(claude_home: Path, mocker: MockerFixture) -> None:
    mocker.patch("sys.stdin", io.StringIO("not json"))
    mocker.patch("skillkit.services.hooks.agent_complete_tts.init_sentry")

    with pytest.raises(SystemExit) as exc_info:
        agent_complete_tts.main()

    assert exc_info.value.code == 0
