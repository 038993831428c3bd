"""UI layer - wires the pickers to a single ECS client and terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.terminal import Terminal
from .core.types import Cluster, Container, Task
from .features.cluster.cluster import ClusterService
from .features.cluster.ui import ClusterUI
from .features.container.ui import ContainerUI
from .features.task.task import TaskService
from .features.task.ui import TaskUI

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class ExecNavigator:
    """Navigator that walks cluster, task and container selection."""

    def __init__(self, ecs_client: ECSClient, terminal: Terminal | None = None) -> None:
        self.terminal = terminal or Terminal()
        self._cluster_ui = ClusterUI(ClusterService(ecs_client), self.terminal)
        self._task_ui = TaskUI(TaskService(ecs_client), self.terminal)
        self._container_ui = ContainerUI(self.terminal)

    def select_cluster(self) -> Cluster:
        return self._cluster_ui.select_cluster()

    def select_task(self, cluster: Cluster) -> Task:
        return self._task_ui.select_task(cluster)

    def select_container(self, task: Task) -> Container:
        return self._container_ui.select_container(task)
