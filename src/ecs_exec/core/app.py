"""Main application logic for the ecs-exec CLI."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from .errors import ECSExecError, StageError
from .utils import print_success

if TYPE_CHECKING:
    from ..features.exec.launcher import ExecLauncher
    from ..ui import ExecNavigator

T = TypeVar("T")


def _run_stage(stage: str, operation: Callable[[], T]) -> T:
    try:
        return operation()
    except ECSExecError as e:
        raise StageError(stage, e) from e


def run_exec_flow(navigator: ExecNavigator, launcher: ExecLauncher, command: str) -> int:
    """Select cluster, task and container in turn, then launch the exec session.

    Every stage runs exactly once; the first failure ends the run as a
    ``StageError`` naming the stage.
    """
    console = navigator.terminal.console

    cluster = _run_stage("selecting cluster", navigator.select_cluster)
    print_success(f"Selected cluster: {cluster.name}", console)
    console.print()

    task = _run_stage("selecting task", lambda: navigator.select_task(cluster))
    print_success(f"Selected task: {task.task_id}", console)
    console.print()

    container = _run_stage("selecting container", lambda: navigator.select_container(task))
    print_success(f"Selected container: {container.name}", console)
    console.print()

    return _run_stage("while running aws command", lambda: launcher.launch(cluster, task, container, command))
