"""UI components for cluster selection."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesError
from ...core.terminal import Terminal
from ...core.types import Cluster
from ...core.utils import show_spinner
from .cluster import ClusterService


class ClusterUI(BaseUIComponent):
    """UI component for cluster selection and display."""

    def __init__(self, cluster_service: ClusterService, terminal: Terminal | None = None) -> None:
        super().__init__(terminal)
        self.cluster_service = cluster_service

    def select_cluster(self) -> Cluster:
        with show_spinner(self.console):
            clusters = self.cluster_service.get_clusters()

        if not clusters:
            raise NoResourcesError("No ECS clusters found")

        index = self.select_index("Select an ECS Cluster:", [cluster.name for cluster in clusters])
        return clusters[index]
