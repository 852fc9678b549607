"""Unit tests for CLI task dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main, resolve_task
from core.config import WorkspaceConfig
from core.errors import WorkspaceTaskError

COMMANDS = {
    "sync:globalTypes": "cli.main.run_sync_global_types_command",
    "sync:importMap": "cli.main.run_sync_import_map_command",
    "build": "cli.main.run_build_command",
}


def _record_commands(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, WorkspaceConfig]]:
    calls: list[tuple[str, WorkspaceConfig]] = []
    for task, target in COMMANDS.items():

        def _fake_command(config: WorkspaceConfig, task: str = task) -> int:
            calls.append((task, config))
            return 0

        monkeypatch.setattr(target, _fake_command)
    return calls


def _forbid_network(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(*args: object, **kwargs: object) -> None:
        raise AssertionError("unexpected network call")

    monkeypatch.setattr("sync.global_types.requests.get", _fail)


@pytest.mark.parametrize("task", sorted(COMMANDS))
def test_cli_runs_exactly_one_command(task: str, tmp_path: Path, monkeypatch) -> None:
    """Each valid task should dispatch to its own command only."""
    calls = _record_commands(monkeypatch)

    exit_code = main([task, "--workspace-root", str(tmp_path)])

    assert exit_code == 0 and [name for name, _ in calls] == [task]
    assert calls[0][1].workspace_root == tmp_path.resolve()


def test_cli_missing_task_lists_available_tasks(tmp_path: Path, monkeypatch, capsys) -> None:
    """A missing task should report every valid task and run nothing."""
    calls = _record_commands(monkeypatch)
    _forbid_network(monkeypatch)

    exit_code = main(["--workspace-root", str(tmp_path)])
    error_output = capsys.readouterr().err

    assert exit_code == 0 and calls == [] and list(tmp_path.iterdir()) == []
    assert "No task provided" in error_output
    assert all(task in error_output for task in COMMANDS)


def test_cli_unknown_task_is_reported(tmp_path: Path, monkeypatch, capsys) -> None:
    """An unknown task should be named in the error and run nothing."""
    calls = _record_commands(monkeypatch)
    _forbid_network(monkeypatch)

    exit_code = main(["sync:everything", "--workspace-root", str(tmp_path)])
    error_output = capsys.readouterr().err

    assert exit_code == 0 and calls == [] and list(tmp_path.iterdir()) == []
    assert "Unknown task: sync:everything" in error_output


@pytest.mark.parametrize("task", [None, "", "Build"])
def test_resolve_task_rejects_missing_and_unknown(task: str | None) -> None:
    """Task names are matched exactly."""
    with pytest.raises(WorkspaceTaskError):
        resolve_task(task)


def test_cli_dash_value_is_reported_as_unknown_task(monkeypatch, capsys) -> None:
    """A dash-prefixed value should be reported like any unknown task."""
    calls = _record_commands(monkeypatch)

    exit_code = main(["-x"])
    error_output = capsys.readouterr().err

    assert exit_code == 0 and calls == [] and "Unknown task: -x" in error_output


def test_cli_ignores_arguments_after_task(tmp_path: Path, monkeypatch) -> None:
    """Extra positional arguments should not stop the task from running."""
    calls = _record_commands(monkeypatch)

    exit_code = main(["build", "extra", "--workspace-root", str(tmp_path)])

    assert exit_code == 0 and [name for name, _ in calls] == ["build"]


@pytest.mark.parametrize(
    ("task", "expected_exit_code"),
    [("sync:globalTypes", 0), ("sync:importMap", 0), ("build", 1)],
)
def test_cli_reports_invalid_config(
    task: str,
    expected_exit_code: int,
    tmp_path: Path,
    monkeypatch,
    capsys,
) -> None:
    """Invalid environment config should print an error instead of a traceback."""
    calls = _record_commands(monkeypatch)
    monkeypatch.setenv("ST_WORKSPACE_HTTP_TIMEOUT", "soon")

    exit_code = main([task, "--workspace-root", str(tmp_path)])
    error_output = capsys.readouterr().err

    assert exit_code == expected_exit_code and calls == []
    assert "Error: Invalid ST_WORKSPACE_HTTP_TIMEOUT" in error_output
