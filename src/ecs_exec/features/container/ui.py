"""UI components for container selection."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesError
from ...core.types import Container, Task
from ...core.utils import print_info


class ContainerUI(BaseUIComponent):
    """UI component for container selection."""

    def select_container(self, task: Task) -> Container:
        """Pick a container, skipping the prompt when the task only has one."""
        if not task.containers:
            raise NoResourcesError(f"Task {task.task_id} has no containers")

        if len(task.containers) == 1:
            container = task.containers[0]
            print_info(f"Using container: {container.name}", self.console)
            return container

        index = self.select_index("Select a Container:", [container.name for container in task.containers])
        return task.containers[index]
