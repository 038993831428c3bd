"""Cluster operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.types import Cluster
from ...core.utils import batch_items, extract_name_from_arn, paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import ClusterTypeDef

# DescribeClusters accepts at most 100 clusters per call
DESCRIBE_BATCH_SIZE = 100


class ClusterService(BaseAWSService):
    """Service for ECS cluster operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_cluster_arns(self) -> list[str]:
        return self.call("list clusters", lambda: paginate_aws_list(self.ecs_client, "list_clusters", "clusterArns"))

    def get_clusters(self) -> list[Cluster]:
        """List every cluster and describe them, keeping list order."""
        cluster_arns = self.get_cluster_arns()
        if not cluster_arns:
            return []

        clusters: list[Cluster] = []
        for batch in batch_items(cluster_arns, DESCRIBE_BATCH_SIZE):
            response = self.call(
                "describe clusters", lambda batch=batch: self.ecs_client.describe_clusters(clusters=batch)
            )
            clusters.extend(_create_cluster(cluster) for cluster in response.get("clusters", []))
        return clusters


def _create_cluster(cluster: ClusterTypeDef) -> Cluster:
    arn = cluster["clusterArn"]
    return Cluster(name=cluster.get("clusterName") or extract_name_from_arn(arn), arn=arn)
