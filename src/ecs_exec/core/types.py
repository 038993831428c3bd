"""Type definitions for ecs-exec."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Cluster:
    name: str
    arn: str


@dataclass(frozen=True)
class Container:
    name: str
    task_arn: str


@dataclass(frozen=True)
class Task:
    arn: str
    cluster_arn: str
    containers: tuple[Container, ...] = field(default_factory=tuple)

    @property
    def task_id(self) -> str:
        """Extract task ID from task ARN."""
        return self.arn.split("/")[-1]
