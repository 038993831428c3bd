"""Shared pytest fixtures for tests."""

import io
from unittest.mock import Mock

import pytest
from rich.console import Console

from ecs_exec.core.terminal import Terminal
from ecs_exec.core.types import Cluster, Container, Task


class ScriptedReader:
    """Line reader that replays canned answers and records the prompts it saw."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("no more scripted input")
        return self.lines.pop(0)


@pytest.fixture
def mock_paginated_client():
    def _create_client(pages: list[dict]) -> Mock:
        client = Mock()
        paginator = Mock()
        paginator.paginate.return_value = pages
        client.get_paginator.return_value = paginator
        return client

    return _create_client


@pytest.fixture
def mock_ecs_client():
    return Mock()


@pytest.fixture
def make_terminal():
    def _create(*lines: str) -> tuple[Terminal, ScriptedReader]:
        reader = ScriptedReader(list(lines))
        terminal = Terminal(Console(file=io.StringIO(), width=200), reader)
        return terminal, reader

    return _create


def terminal_output(terminal: Terminal) -> str:
    return terminal.console.file.getvalue()


@pytest.fixture
def make_task():
    def _create(arn: str, *container_names: str, cluster_arn: str = "arn:aws:ecs:us-east-1:123:cluster/prod") -> Task:
        containers = tuple(Container(name=name, task_arn=arn) for name in container_names)
        return Task(arn=arn, cluster_arn=cluster_arn, containers=containers)

    return _create


@pytest.fixture
def prod_cluster():
    return Cluster(name="prod", arn="arn:aws:ecs:us-east-1:123:cluster/prod")
