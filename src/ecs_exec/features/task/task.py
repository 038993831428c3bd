"""Task operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.types import Cluster, Container, Task
from ...core.utils import batch_items, paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import TaskTypeDef

# DescribeTasks accepts at most 100 tasks per call
DESCRIBE_BATCH_SIZE = 100


class TaskService(BaseAWSService):
    """Service for ECS task operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_task_arns(self, cluster: Cluster) -> list[str]:
        return self.call(
            "list tasks", lambda: paginate_aws_list(self.ecs_client, "list_tasks", "taskArns", cluster=cluster.arn)
        )

    def get_tasks(self, cluster: Cluster) -> list[Task]:
        task_arns = self.get_task_arns(cluster)
        if not task_arns:
            return []

        tasks: list[Task] = []
        for batch in batch_items(task_arns, DESCRIBE_BATCH_SIZE):
            response = self.call(
                "describe tasks", lambda batch=batch: self.ecs_client.describe_tasks(cluster=cluster.arn, tasks=batch)
            )
            tasks.extend(_create_task(task, cluster.arn) for task in response.get("tasks", []))
        return tasks


def _create_task(task: TaskTypeDef, cluster_arn: str) -> Task:
    task_arn = task["taskArn"]
    containers = tuple(
        Container(name=container["name"], task_arn=task_arn) for container in task.get("containers", [])
    )
    return Task(
        arn=task_arn,
        cluster_arn=task.get("clusterArn", cluster_arn),
        containers=containers,
    )
