"""Base classes for AWS services and UI components."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from .errors import AWSCallError
from .selection import prompt_for_index, render_menu
from .terminal import Terminal

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mypy_boto3_ecs.client import ECSClient
    from rich.console import Console

T = TypeVar("T")


class BaseAWSService:
    """Base class for AWS service interactions with common patterns."""

    def __init__(self, ecs_client: ECSClient) -> None:
        self.ecs_client = ecs_client

    def call(self, stage: str, operation: Callable[[], T]) -> T:
        """Run an API call, tagging botocore failures with the stage they happened in."""
        try:
            return operation()
        except (ClientError, BotoCoreError) as e:
            raise AWSCallError(stage, e) from e


class BaseUIComponent:
    """Base class for UI components with common patterns."""

    def __init__(self, terminal: Terminal | None = None) -> None:
        self.terminal = terminal or Terminal()

    @property
    def console(self) -> Console:
        return self.terminal.console

    def select_index(self, prompt: str, labels: Sequence[str]) -> int:
        """Standard numbered-menu selection."""
        render_menu(self.terminal, labels)
        return prompt_for_index(self.terminal, prompt, len(labels))
