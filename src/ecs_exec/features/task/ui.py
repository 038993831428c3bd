"""UI components for task selection."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesError
from ...core.selection import format_menu_line, prompt_for_index
from ...core.terminal import Terminal
from ...core.types import Cluster, Task
from ...core.utils import show_spinner
from .task import TaskService


class TaskUI(BaseUIComponent):
    """UI component for task selection and display."""

    def __init__(self, task_service: TaskService, terminal: Terminal | None = None) -> None:
        super().__init__(terminal)
        self.task_service = task_service

    def select_task(self, cluster: Cluster) -> Task:
        with show_spinner(self.console):
            tasks = self.task_service.get_tasks(cluster)

        if not tasks:
            raise NoResourcesError(f"No running tasks found in cluster {cluster.name}")

        self.display_tasks(tasks)
        index = prompt_for_index(self.terminal, "Select an ECS Task:", len(tasks))
        return tasks[index]

    def display_tasks(self, tasks: list[Task]) -> None:
        # Container names are informational only
        for index, task in enumerate(tasks):
            self.terminal.print_line(format_menu_line(index, task.arn))
            for container in task.containers:
                self.terminal.print_line(f"  * {container.name}")
